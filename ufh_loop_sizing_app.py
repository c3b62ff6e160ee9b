# app.py — Underfloor Heating Loop Sizer (max loop length per bore for a Δp budget, feed-run losses included)
import numpy as np
import streamlit as st

from ufh_sizer import CalculationInput, evaluate, heat_demand
from ufh_sizer.defaults import (CANDIDATE_DIAMETERS_MM, DEFAULT_DELTA_T, DEFAULT_DIAMETERS_MM,
                                DEFAULT_DP_MAX_KPA, DEFAULT_FEED_LENGTH, DEFAULT_H_TOTAL,
                                DEFAULT_INS_LAMBDA, DEFAULT_INS_THICKNESS_MM, DEFAULT_INSULATION,
                                DEFAULT_Q_USER, DEFAULT_ROUGHNESS_MM, DEFAULT_STEP_MM, DEFAULT_T_AIR,
                                DEFAULT_T_MEAN, DEFAULT_T_SURFACE, FLUID_PG30, FLUID_WATER,
                                INSULATION_CUSTOM, INSULATION_LABELS, INSULATIONS, LAYING_STEPS_MM,
                                MODE_BY_DELTA_T, MODE_BY_FLUX)
from ufh_sizer.report import (display_frame, fmt, inputs_frame, make_pdf_report, pressure_drop_curve,
                              results_frame)

# -------------------- UI --------------------
st.set_page_config(page_title="UFH Loop Sizer", layout="wide")
st.title("Underfloor heating · loop length per pipe bore")

with st.sidebar:
    st.header("Heat & hydraulics")
    by_flux = st.toggle("Enter floor flux q (W/m²) instead of ΔT", value=False)
    heat_mode = MODE_BY_FLUX if by_flux else MODE_BY_DELTA_T
    # air temperature also drives the feed-run loss, so it stays in both modes
    t_air = st.number_input("Room air temperature (°C)", value=DEFAULT_T_AIR, step=0.5)
    if heat_mode == MODE_BY_DELTA_T:
        t_surface = st.number_input("Floor surface temperature (°C)", value=DEFAULT_T_SURFACE, step=0.5)
        h_total   = st.number_input("Floor heat-transfer coefficient h (W/m²·K)", value=DEFAULT_H_TOTAL, step=0.5,
                                    help="Usual range 8–11 W/m²·K (convection + radiation).")
        q_user = DEFAULT_Q_USER
    else:
        q_user = st.number_input("Floor heat flux q (W/m²)", value=DEFAULT_Q_USER, step=1.0,
                                 help="Typical 40–80 W/m² depending on floor covering and ΔT.")
        t_surface, h_total = DEFAULT_T_SURFACE, DEFAULT_H_TOTAL
    step_mm    = st.selectbox("Laying step (mm)", LAYING_STEPS_MM, index=LAYING_STEPS_MM.index(int(DEFAULT_STEP_MM)))
    delta_t    = st.number_input("Carrier ΔT, supply − return (K)", value=DEFAULT_DELTA_T, step=0.5)
    dp_max_kpa = st.number_input("Allowable Δp per loop (kPa)", value=DEFAULT_DP_MAX_KPA, step=1.0)

c1, c2 = st.columns(2)
with c1:
    st.subheader("Fluid & properties")
    fluid_label = st.selectbox("Fluid", ["Water", "Propylene glycol 30%"], index=0)
    fluid = FLUID_WATER if fluid_label == "Water" else FLUID_PG30
    t_mean = st.number_input("Mean fluid temperature (°C)", value=DEFAULT_T_MEAN, step=0.5)
    roughness_mm = st.number_input("Pipe roughness ε (mm)", min_value=0.0, value=DEFAULT_ROUGHNESS_MM,
                                   step=0.001, format="%.4f")
    st.caption("Water: cp≈4180 J/(kg·K). PG 30%: cp≈3800 J/(kg·K), ρ≈1030 kg/m³, μ≈2.3 mPa·s.")

with c2:
    st.subheader("Feed run & insulation")
    insulation = st.selectbox("Insulation", INSULATIONS, index=INSULATIONS.index(DEFAULT_INSULATION),
                              format_func=lambda k: INSULATION_LABELS[k])
    feed_length = st.number_input("Feed run length (m)", value=DEFAULT_FEED_LENGTH, step=1.0)
    if insulation == INSULATION_CUSTOM:
        ins_lambda = st.number_input("Insulation λ (W/m·K)", value=DEFAULT_INS_LAMBDA, step=0.001, format="%.3f")
        ins_thickness_mm = st.number_input("Insulation thickness (mm)", value=DEFAULT_INS_THICKNESS_MM, step=1.0)
    else:
        ins_lambda, ins_thickness_mm = DEFAULT_INS_LAMBDA, DEFAULT_INS_THICKNESS_MM
    st.caption("Feed losses add to the loop's required power and flow; the feed length adds to the hydraulic length.")

inp = CalculationInput(
    t_surface=t_surface, t_air=t_air, step_mm=float(step_mm), delta_t=delta_t, h_total=h_total,
    dp_max_kpa=dp_max_kpa, feed_length=feed_length, fluid=fluid, t_mean=t_mean,
    roughness_mm=roughness_mm, insulation=insulation, ins_lambda=ins_lambda,
    ins_thickness_mm=ins_thickness_mm, heat_mode=heat_mode, q_user=q_user,
)
demand = heat_demand(inp)

st.markdown("---")
st.subheader("Heat demand")
h1, h2, h3 = st.columns(3)
h1.metric("Floor heat flux q (W/m²)", fmt(demand.q_req, 1))
h2.metric("Power per metre of pipe (W/m)", fmt(demand.p_per_m, 1))
h3.metric("Laying step (m)", fmt(demand.step, 3))

diameters = st.multiselect("Internal diameters (mm)", CANDIDATE_DIAMETERS_MM, default=DEFAULT_DIAMETERS_MM)
if not diameters:
    st.error("Select at least one internal diameter."); st.stop()

results = evaluate(diameters, inp)

st.subheader("Results by bore")
f1, f2 = st.columns(2)
f1.metric("Feed-run loss q' (W/m)", fmt(results[0].feed_loss_per_m, 2))
f1.caption(f"At D = {results[0].diameter_mm:g} mm")
f2.metric("Feed-run power (W)", fmt(results[0].feed_power, 0))
f2.caption("q' · L_feed")
st.dataframe(display_frame(results), use_container_width=True, hide_index=True)

st.subheader("Δp vs loop length")
L_max = max([r.loop_length for r in results if np.isfinite(r.loop_length)] + [1.0])
curve = pressure_drop_curve(diameters, inp, np.linspace(0.0, 1.25*min(L_max, 1000.0), 61))
st.line_chart(curve)
st.caption(f"Horizontal budget: {fmt(dp_max_kpa, 1)} kPa over loop + feed run.")

# --------- Exports (CSV/PDF) ----------
df_inputs = inputs_frame(inp, diameters)
df_results = results_frame(results)
e1, e2, e3 = st.columns(3)
e1.download_button("⬇️ Download inputs.csv", df_inputs.to_csv(index=False).encode("utf-8"),
                   file_name="ufh_inputs.csv", mime="text/csv")
e2.download_button("⬇️ Download results.csv", df_results.to_csv(index=False).encode("utf-8"),
                   file_name="ufh_results.csv", mime="text/csv")
e3.download_button("⬇️ Download report.pdf", make_pdf_report(inp, diameters, results),
                   file_name="ufh_report.pdf", mime="application/pdf")

# ---------------- Methods banner (latex) ---------------
st.markdown("---")
st.header("Methods & assumptions")

st.subheader("Heat")
st.markdown("- **Floor flux**, either from ΔT or entered directly, and **power per metre of pipe**:")
st.latex(r"q = h\,(T_{\text{surf}}-T_{\text{air}}),\qquad p_m = q\,s")
st.markdown("- **Served area** for a spiral layout: $A \\approx L\\,s$.")
st.markdown("- **Feed run**, cylindrical wall + insulation + outer film in series:")
st.latex(r"q' = \frac{\Delta T}{\dfrac{\ln(r_1/r_i)}{2\pi\lambda_{\text{pipe}}}+\dfrac{\ln(r_2/r_1)}{2\pi\lambda_{\text{ins}}}+\dfrac{1}{2\pi r_2 h_{\text{out}}}},\qquad P_{\text{feed}} = q'\,L_{\text{feed}}")

st.subheader("Hydraulics")
st.latex(r"\dot V = \frac{p_m L + P_{\text{feed}}}{\rho\,c_p\,\Delta T},\qquad v=\frac{4\dot V}{\pi D^2},\qquad \mathrm{Re}=\frac{\rho v D}{\mu}")
st.latex(r"\Delta p = f\,\frac{L+L_{\text{feed}}}{D}\,\frac{\rho v^2}{2},\qquad f=\begin{cases}64/\mathrm{Re} & \mathrm{Re}<2000\\[2pt] \dfrac{0.25}{\left[\log_{10}\!\left(\frac{\varepsilon}{3.7D}+\frac{5.74}{\mathrm{Re}^{0.9}}\right)\right]^2} & \mathrm{Re}\ge 2000\end{cases}")
st.markdown("""
- The loop length is limited only by hydraulics (the allowable Δp). No installation limit is applied.
- Maximum length: the bracket doubles from 1 m, then bisection runs until |Δp − Δp_max| < 1 Pa.
- The friction factor switches at Re = 2000 with no transitional blending, so Δp jumps there.
- The feed run uses the same bore and friction factor as the loop.
- Properties are taken at the mean fluid temperature. Glycol's higher viscosity raises resistance, and its lower cp raises the flow.
- A dash (—) marks a value that could not be computed for the given inputs.
""")
