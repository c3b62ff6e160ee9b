import math

import pytest

from ufh_sizer.friction import friction_factor

EPS = 0.007e-3
D = 0.016


def swamee_jain(Re, eps, D):
    return 0.25/math.log10(eps/(3.7*D) + 5.74/Re**0.9)**2


def test_laminar_just_below_switch():
    assert friction_factor(1999.0, EPS, D) == pytest.approx(64.0/1999.0)


def test_swamee_jain_at_switch():
    assert friction_factor(2000.0, EPS, D) == pytest.approx(swamee_jain(2000.0, EPS, D))


def test_switch_is_a_jump_not_continuous():
    below = friction_factor(1999.999, EPS, D)
    at = friction_factor(2000.0, EPS, D)
    assert at > below
    assert at - below > 0.01


@pytest.mark.parametrize("Re", [5000.0, 2e4, 1e5])
def test_turbulent_matches_swamee_jain(Re):
    assert friction_factor(Re, EPS, D) == pytest.approx(swamee_jain(Re, EPS, D))


def test_rougher_pipe_has_higher_turbulent_friction():
    assert friction_factor(2e4, 0.05e-3, D) > friction_factor(2e4, EPS, D)


@pytest.mark.parametrize("Re, d", [(0.0, D), (-10.0, D), (3000.0, 0.0), (3000.0, -0.01)])
def test_no_flow_gives_zero(Re, d):
    assert friction_factor(Re, EPS, d) == 0.0


@pytest.mark.parametrize("Re, eps", [(math.inf, 0.0), (5000.0, -1e-2), (math.nan, EPS), (5000.0, math.inf)])
def test_invalid_log_argument_gives_nan(Re, eps):
    assert math.isnan(friction_factor(Re, eps, D))
