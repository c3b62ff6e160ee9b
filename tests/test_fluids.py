import math

import pytest

from ufh_sizer.defaults import FLUID_PG30, FLUID_WATER, MU_WATER_MIN
from ufh_sizer.fluids import resolve_fluid_properties


def test_water_at_35C():
    p = resolve_fluid_properties(FLUID_WATER, 35.0)
    assert p.rho == pytest.approx(990.7)
    assert p.mu == pytest.approx(0.00179 - 1.3e-5*35 - 1.7e-7*35*35)
    assert p.cp == 4180.0


def test_water_density_and_viscosity_fall_with_temperature():
    cold = resolve_fluid_properties(FLUID_WATER, 20.0)
    warm = resolve_fluid_properties(FLUID_WATER, 50.0)
    assert warm.rho < cold.rho
    assert warm.mu < cold.mu


@pytest.mark.parametrize("T", [90.0, 100.0, 250.0])
def test_water_viscosity_floor(T):
    assert resolve_fluid_properties(FLUID_WATER, T).mu == MU_WATER_MIN


@pytest.mark.parametrize("T", [-10.0, 35.0, 80.0])
def test_glycol_is_temperature_independent(T):
    p = resolve_fluid_properties(FLUID_PG30, T)
    assert p.as_dict() == {"rho": 1030.0, "mu": 0.0023, "cp": 3800.0}


def test_non_finite_temperature_does_not_raise():
    p = resolve_fluid_properties(FLUID_WATER, math.nan)
    assert p.cp == 4180.0
    assert math.isnan(p.rho)
