"""Underfloor-heating loop sizing: maximum loop length per pipe bore for a Δp budget."""
from .feed_loss import FeedLoss, InsulationSpec, feed_heat_loss, feed_loss_per_metre, resolve_insulation
from .fluids import FluidProperties, resolve_fluid_properties
from .friction import friction_factor
from .solver import (CalculationInput, DiameterResult, HeatDemand, LoopState, heat_demand, loop_state,
                     pressure_drop_for_length, solve_max_length)
from .sweep import evaluate

__all__ = [
    "CalculationInput", "DiameterResult", "FeedLoss", "FluidProperties", "HeatDemand",
    "InsulationSpec", "LoopState", "evaluate", "feed_heat_loss", "feed_loss_per_metre",
    "friction_factor", "heat_demand", "loop_state", "pressure_drop_for_length",
    "resolve_fluid_properties", "resolve_insulation", "solve_max_length",
]
