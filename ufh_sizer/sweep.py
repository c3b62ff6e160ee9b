# sweep.py — evaluate every candidate bore for one set of inputs
import logging
from typing import Iterable, List

from .fluids import resolve_fluid_properties
from .solver import CalculationInput, DiameterResult, solve_max_length

logger = logging.getLogger(__name__)


def evaluate(diameters_mm: Iterable[float], inp: CalculationInput) -> List[DiameterResult]:
    """Solve each distinct bore and return the rows sorted by diameter.

    Pure function of its arguments; callers recompute the whole list on any change.
    """
    fluid = resolve_fluid_properties(inp.fluid, inp.t_mean)
    results = [solve_max_length(D_mm, inp, fluid) for D_mm in set(diameters_mm)]
    results.sort(key=lambda r: r.diameter_mm)
    logger.debug("Evaluated %d bores (fluid=%s, rho=%.1f, mu=%.6f)",
                 len(results), inp.fluid, fluid.rho, fluid.mu)
    return results
