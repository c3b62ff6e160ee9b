# report.py — tables, curves and the PDF report built from sweep results
import io
import math
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from .defaults import LIMITED_HEAT, LIMITED_HYDRAULIC
from .feed_loss import feed_heat_loss, resolve_insulation
from .fluids import resolve_fluid_properties
from .solver import CalculationInput, DiameterResult, heat_demand, loop_state

UNAVAILABLE = "—"

LIMIT_LABELS: Dict[str, str] = {LIMITED_HYDRAULIC: "hydraulics", LIMITED_HEAT: "heat"}

# (column, attribute, digits) in table order
RESULT_COLUMNS = [
    ("D_in, mm", "diameter_mm", None),
    ("L_loop, m", "loop_length", 1),
    ("L_total, m", "total_length", 1),
    ("Flow, L/min", "flow_lpm", 2),
    ("P loop, W", "loop_power", 0),
    ("Area, m²", "area", 2),
    ("P feed, W", "feed_power", 0),
    ("P total, W", "total_power", 0),
    ("v, m/s", "velocity", 3),
    ("Re", "reynolds", 0),
    ("Δp, kPa", "dp_kpa", 2),
]


def fmt(value, digits: int = 2) -> str:
    """Fixed-point text; anything missing or non-finite shows as the unavailable marker."""
    try:
        x = float(value)
    except (TypeError, ValueError):
        return UNAVAILABLE
    if not math.isfinite(x):
        return UNAVAILABLE
    return f"{x:.{digits}f}"


def results_frame(results: Sequence[DiameterResult]) -> pd.DataFrame:
    rows = []
    for r in results:
        row = {col: getattr(r, attr) for col, attr, _ in RESULT_COLUMNS}
        row["Limited by"] = LIMIT_LABELS.get(r.limited, r.limited)
        rows.append(row)
    return pd.DataFrame(rows, columns=[c for c, _, _ in RESULT_COLUMNS] + ["Limited by"])


def display_frame(results: Sequence[DiameterResult]) -> pd.DataFrame:
    df = results_frame(results)
    for col, _, digits in RESULT_COLUMNS:
        if digits is not None:
            df[col] = df[col].map(lambda v, d=digits: fmt(v, d))
    return df


def inputs_frame(inp: CalculationInput, diameters_mm: Sequence[float]) -> pd.DataFrame:
    inputs = {"timestamp": datetime.now().isoformat(timespec='seconds')}
    inputs.update(inp.as_dict())
    inputs["diameters_mm"] = ", ".join(f"{d:g}" for d in sorted(diameters_mm))
    return pd.DataFrame(list(inputs.items()), columns=["parameter", "value"])


def pressure_drop_curve(diameters_mm: Sequence[float], inp: CalculationInput,
                        lengths: Optional[np.ndarray] = None) -> pd.DataFrame:
    """Δp [kPa] over loop + feed run against loop length, one column per bore."""
    if lengths is None:
        lengths = np.linspace(0.0, 150.0, 61)
    fluid = resolve_fluid_properties(inp.fluid, inp.t_mean)
    demand = heat_demand(inp)
    ins = resolve_insulation(inp.insulation, inp.ins_lambda, inp.ins_thickness_mm)
    eps = inp.roughness_mm/1000.0
    data = {}
    for D_mm in sorted(set(diameters_mm)):
        D = D_mm/1000.0
        feed = feed_heat_loss(D, inp.t_mean, inp.t_air, ins, inp.feed_length)
        dp = [loop_state(float(L), D, demand.p_per_m, feed, inp.feed_length, fluid,
                         inp.delta_t, eps).dp/1000.0 for L in lengths]
        data[f"D={D_mm:g} mm"] = np.asarray(dp, dtype=float)
    df = pd.DataFrame(data, index=pd.Index(np.asarray(lengths, dtype=float), name="L_loop, m"))
    return df


def make_pdf_report(inp: CalculationInput, diameters_mm: Sequence[float],
                    results: List[DiameterResult]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    width, height = A4
    x0, y = 18*mm, height-18*mm
    lh = 6*mm
    def line(text, bold=False):
        nonlocal y
        if y < 20*mm:
            c.showPage(); y = height-20*mm
        c.setFont("Helvetica-Bold" if bold else "Helvetica", 10)
        c.drawString(x0, y, str(text)); y -= lh

    line("Underfloor Heating Loop Sizing Report", bold=True)
    line(f"Generated: {datetime.now().isoformat(sep=' ', timespec='seconds')}")
    line("")

    line("INPUTS", bold=True)
    for k, v in inp.as_dict().items():
        line(f"{k}: {v}")
    line(f"diameters_mm: {', '.join(f'{d:g}' for d in sorted(diameters_mm))}")

    demand = heat_demand(inp)
    line(""); line("HEAT DEMAND", bold=True)
    line(f"q floor (W/m²): {fmt(demand.q_req, 1)}  |  p per metre of pipe (W/m): {fmt(demand.p_per_m, 1)}  |  step (m): {fmt(demand.step, 3)}")

    line(""); line("RESULTS BY BORE", bold=True)
    for r in results:
        line(f"D={r.diameter_mm:g} mm: L_loop={fmt(r.loop_length, 1)} m  L_total={fmt(r.total_length, 1)} m  "
             f"Q={fmt(r.flow_lpm, 2)} L/min  v={fmt(r.velocity, 3)} m/s  Re={fmt(r.reynolds, 0)}")
        line(f"     P_loop={fmt(r.loop_power, 0)} W  P_feed={fmt(r.feed_power, 0)} W (q'={fmt(r.feed_loss_per_m, 2)} W/m)  "
             f"P_total={fmt(r.total_power, 0)} W  A={fmt(r.area, 2)} m²  dp={fmt(r.dp_kpa, 2)} kPa  "
             f"[{LIMIT_LABELS.get(r.limited, r.limited)}]")

    # Methods page
    c.showPage(); y = height-18*mm
    c.setFont("Helvetica-Bold", 12); c.drawString(18*mm, y, "Methods (summary)"); y -= 8*mm
    c.setFont("Helvetica", 9)
    bullets = [
        "Floor flux: q = h*(T_surf - T_air), or q given directly; power per metre of pipe p = q*step.",
        "Served area for a spiral layout: A = L_loop*step.",
        "Feed run: q' = dT / (R_wall + R_ins + R_out), cylindrical layers, h_out = 8 W/m²K, PE wall 2 mm.",
        "Feed losses add to the required power (flow); feed length adds to the hydraulic length.",
        "Flow: Q = (p*L + P_feed) / (rho*cp*dT_carrier).",
        "Darcy-Weisbach; f = 64/Re below Re=2000, Swamee-Jain above (no transitional blending).",
        "Max loop length: bracket by doubling, then bisection to |dp - dp_max| < 1 Pa (60 iterations max).",
        "Water properties from low-order fits at T_mean; PG30 at fixed properties.",
    ]
    for b in bullets:
        if y < 20*mm: c.showPage(); y = height-18*mm; c.setFont("Helvetica", 9)
        c.drawString(18*mm, y, f"• {b}"); y -= 6*mm

    c.showPage(); c.save(); buf.seek(0); return buf.read()
