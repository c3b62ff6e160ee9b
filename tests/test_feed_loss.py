import math

import pytest

from ufh_sizer.defaults import INSULATION_CUSTOM, INSULATION_PE6, INSULATION_PE9, INSULATION_PE13
from ufh_sizer.feed_loss import InsulationSpec, feed_heat_loss, feed_loss_per_metre, resolve_insulation

D = 0.016


def test_presets():
    assert resolve_insulation(INSULATION_PE6, 1.0, 50.0) == InsulationSpec(lam=0.035, thk_m=0.006)
    assert resolve_insulation(INSULATION_PE9, 1.0, 50.0) == InsulationSpec(lam=0.035, thk_m=0.009)
    assert resolve_insulation(INSULATION_PE13, 1.0, 50.0) == InsulationSpec(lam=0.035, thk_m=0.013)


def test_custom_is_floored():
    ins = resolve_insulation(INSULATION_CUSTOM, 0.0, -3.0)
    assert ins.lam == 0.005
    assert ins.thk_m == pytest.approx(0.0001)
    assert resolve_insulation(INSULATION_CUSTOM, 0.04, 20.0) == InsulationSpec(lam=0.04, thk_m=0.02)


def test_reference_loss_matches_series_resistances():
    r_i, r1, r2 = 0.008, 0.010, 0.019
    R = (math.log(r1/r_i)/(2*math.pi*0.40) + math.log(r2/r1)/(2*math.pi*0.035)
         + 1.0/(8.0*2*math.pi*r2))
    q = feed_loss_per_metre(D, 35.0, 22.0, InsulationSpec(0.035, 0.009))
    assert q == pytest.approx(13.0/R)
    assert 2.5 < q < 4.0


def test_thicker_insulation_loses_less():
    losses = [feed_loss_per_metre(D, 35.0, 22.0, resolve_insulation(INSULATION_CUSTOM, 0.035, t))
              for t in (3.0, 6.0, 9.0, 13.0, 25.0)]
    assert all(a > b for a, b in zip(losses, losses[1:]))


def test_fluid_colder_than_air_gives_no_gain():
    assert feed_loss_per_metre(D, 18.0, 22.0, InsulationSpec(0.035, 0.009)) == 0.0


def test_small_bores_share_the_radius_floor():
    ins = InsulationSpec(0.035, 0.009)
    assert feed_loss_per_metre(0.001, 35.0, 22.0, ins) == feed_loss_per_metre(0.003, 35.0, 22.0, ins)


def test_power_grows_with_feed_length():
    ins = InsulationSpec(0.035, 0.009)
    powers = [feed_heat_loss(D, 35.0, 22.0, ins, L).power for L in (0.0, 5.0, 10.0, 20.0)]
    assert powers[0] == 0.0
    assert all(a < b for a, b in zip(powers, powers[1:]))
    loss = feed_heat_loss(D, 35.0, 22.0, ins, 10.0)
    assert loss.power == pytest.approx(10.0*loss.q_per_m)


@pytest.mark.parametrize("D_bad", [math.nan, math.inf, -0.01, 0.0])
def test_degenerate_bore_does_not_raise(D_bad):
    q = feed_loss_per_metre(D_bad, 35.0, 22.0, InsulationSpec(0.035, 0.009))
    assert q >= 0.0 or math.isnan(q)
