import math

import numpy as np
import pytest

from ufh_sizer import CalculationInput, DiameterResult, evaluate
from ufh_sizer.report import (UNAVAILABLE, display_frame, fmt, inputs_frame, make_pdf_report,
                              pressure_drop_curve, results_frame)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None, "abc"])
def test_fmt_marks_unavailable(value):
    assert fmt(value) == UNAVAILABLE


def test_fmt_fixed_point():
    assert fmt(1.234, 1) == "1.2"
    assert fmt(1999.6, 0) == "2000"
    assert fmt(0.0, 3) == "0.000"


def test_results_frame_columns_and_rows():
    df = results_frame(evaluate([16, 12], CalculationInput()))
    assert list(df.columns) == ["D_in, mm", "L_loop, m", "L_total, m", "Flow, L/min", "P loop, W",
                                "Area, m²", "P feed, W", "P total, W", "v, m/s", "Re", "Δp, kPa",
                                "Limited by"]
    assert list(df["D_in, mm"]) == [12, 16]
    assert set(df["Limited by"]) == {"hydraulics"}


def test_display_frame_renders_non_finite_as_dash():
    r = DiameterResult(diameter_mm=16, loop_length=math.nan, total_length=math.inf, flow_lpm=1.0,
                       loop_power=0.0, feed_power=0.0, total_power=0.0, feed_loss_per_m=0.0,
                       area=0.0, velocity=0.0, reynolds=0.0, friction_factor=0.0, dp_kpa=math.nan,
                       limited="heat")
    row = display_frame([r]).iloc[0]
    assert row["L_loop, m"] == UNAVAILABLE
    assert row["L_total, m"] == UNAVAILABLE
    assert row["Δp, kPa"] == UNAVAILABLE
    assert row["Flow, L/min"] == "1.00"
    assert row["Limited by"] == "heat"


def test_inputs_frame_lists_every_field():
    df = inputs_frame(CalculationInput(), [16, 10])
    values = dict(zip(df["parameter"], df["value"]))
    assert values["dp_max_kpa"] == 20.0
    assert values["insulation"] == "pe9"
    assert values["diameters_mm"] == "10, 16"
    assert "timestamp" in values


def test_pressure_drop_curve_shape_and_trend():
    lengths = np.linspace(0.0, 120.0, 25)
    df = pressure_drop_curve([16, 12], CalculationInput(), lengths)
    assert list(df.columns) == ["D=12 mm", "D=16 mm"]
    assert df.shape == (25, 2)
    assert (df.diff().dropna() >= 0).all().all()
    assert (df["D=12 mm"].iloc[1:] > df["D=16 mm"].iloc[1:]).all()


def test_pdf_report_is_a_pdf():
    inp = CalculationInput()
    pdf = make_pdf_report(inp, [12, 16], evaluate([12, 16], inp))
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000
