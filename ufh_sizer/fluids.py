# fluids.py — carrier fluid properties at the mean loop temperature
from dataclasses import dataclass
from typing import Dict

from .defaults import CP_WATER, FLUID_PG30, MU_WATER_MIN, PG30_PROPS


@dataclass(frozen=True)
class FluidProperties:
    rho: float   # kg/m³
    mu: float    # Pa·s
    cp: float    # J/(kg·K)

    def as_dict(self) -> Dict[str, float]:
        return {"rho": self.rho, "mu": self.mu, "cp": self.cp}


def water_properties(T_C: float) -> FluidProperties:
    """Low-order fits around 10–60 °C. Viscosity is floored so the fit never collapses at high T."""
    rho = 1000.0 - 0.3*(T_C - 4.0)
    mu = 0.00179 - 1.3e-5*T_C - 1.7e-7*(T_C*T_C)
    return FluidProperties(rho=rho, mu=max(mu, MU_WATER_MIN), cp=CP_WATER)


def resolve_fluid_properties(fluid: str, T_mean_C: float) -> FluidProperties:
    if fluid == FLUID_PG30:
        return FluidProperties(rho=PG30_PROPS["rho"], mu=PG30_PROPS["mu"], cp=PG30_PROPS["cp"])
    return water_properties(T_mean_C)
