# solver.py — maximum loop length per bore for a given pressure-drop budget
import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .defaults import (BISECT_ITERS, DEFAULT_DELTA_T, DEFAULT_DP_MAX_KPA, DEFAULT_FEED_LENGTH,
                       DEFAULT_FLUID, DEFAULT_H_TOTAL, DEFAULT_HEAT_MODE, DEFAULT_INS_LAMBDA,
                       DEFAULT_INS_THICKNESS_MM, DEFAULT_INSULATION, DEFAULT_Q_USER,
                       DEFAULT_ROUGHNESS_MM, DEFAULT_STEP_MM, DEFAULT_T_AIR, DEFAULT_T_MEAN,
                       DEFAULT_T_SURFACE, DP_TOLERANCE_PA, FLUIDS, HEAT_MODES, INSULATIONS,
                       LIMITED_HEAT, LIMITED_HYDRAULIC, MODE_BY_FLUX, SEARCH_CAP_M)
from .feed_loss import FeedLoss, feed_heat_loss, resolve_insulation
from .fluids import FluidProperties, resolve_fluid_properties
from .friction import friction_factor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationInput:
    """One complete set of form values, in the units the form uses.

    ``heat_mode`` decides where the floor flux comes from: ``by_delta_t`` uses
    h_total·(t_surface − t_air), ``by_flux`` uses q_user. Numeric fields are not
    checked; selection keys are.
    """
    t_surface: float = DEFAULT_T_SURFACE          # °C
    t_air: float = DEFAULT_T_AIR                  # °C
    step_mm: float = DEFAULT_STEP_MM
    delta_t: float = DEFAULT_DELTA_T              # K
    h_total: float = DEFAULT_H_TOTAL              # W/(m²·K)
    dp_max_kpa: float = DEFAULT_DP_MAX_KPA
    feed_length: float = DEFAULT_FEED_LENGTH      # m
    fluid: str = DEFAULT_FLUID
    t_mean: float = DEFAULT_T_MEAN                # °C
    roughness_mm: float = DEFAULT_ROUGHNESS_MM
    insulation: str = DEFAULT_INSULATION
    ins_lambda: float = DEFAULT_INS_LAMBDA        # W/(m·K), custom only
    ins_thickness_mm: float = DEFAULT_INS_THICKNESS_MM
    heat_mode: str = DEFAULT_HEAT_MODE
    q_user: float = DEFAULT_Q_USER                # W/m², by_flux only

    def __post_init__(self):
        for name, value, allowed in (("fluid", self.fluid, FLUIDS),
                                     ("insulation", self.insulation, INSULATIONS),
                                     ("heat_mode", self.heat_mode, HEAT_MODES)):
            if value not in allowed:
                raise ValueError(f"Unknown {name} {value!r}; expected one of {allowed}")

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class HeatDemand:
    q_req: float     # W/m² of floor
    step: float      # m
    p_per_m: float   # W per metre of loop pipe


@dataclass(frozen=True)
class LoopState:
    power: float       # W carried by the fluid (loop + feed)
    flow: float        # m³/s
    velocity: float    # m/s
    Re: float
    f: float
    dp: float          # Pa over loop + feed


@dataclass(frozen=True)
class DiameterResult:
    diameter_mm: float
    loop_length: float       # m
    total_length: float      # m, loop + feed run
    flow_lpm: float
    loop_power: float        # W
    feed_power: float        # W
    total_power: float       # W
    feed_loss_per_m: float   # W/m
    area: float              # m²
    velocity: float          # m/s
    reynolds: float
    friction_factor: float
    dp_kpa: float
    limited: str

    def as_dict(self) -> Dict:
        return asdict(self)


def _div(num: float, den: float) -> float:
    # float division without ZeroDivisionError: x/0 -> ±inf, 0/0 -> nan
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)*math.copysign(1.0, den)
    return num/den


def heat_demand(inp: CalculationInput) -> HeatDemand:
    if inp.heat_mode == MODE_BY_FLUX:
        q_req = max(inp.q_user, 0.0)
    else:
        q_req = inp.h_total*max(inp.t_surface - inp.t_air, 0.0)
    step = inp.step_mm/1000.0
    return HeatDemand(q_req=q_req, step=step, p_per_m=q_req*step)


def loop_state(L_loop: float, D: float, p_per_m: float, feed: FeedLoss, feed_length: float,
               fluid: FluidProperties, delta_t: float, eps: float) -> LoopState:
    """Flow state of the loop (plus feed run) for a trial loop length. D and eps in metres."""
    P_total = p_per_m*L_loop + feed.power
    Q = 0.0 if P_total <= 0 else _div(P_total, fluid.rho*fluid.cp*delta_t)
    A = math.pi*D*D/4.0
    v = _div(Q, A)
    Re = _div(fluid.rho*v*D, fluid.mu)
    f = friction_factor(Re, eps, D)
    dp_per_m = _div(f*(fluid.rho*v*v/2.0), D) if f != 0 else 0.0
    return LoopState(power=P_total, flow=Q, velocity=v, Re=Re, f=f,
                     dp=dp_per_m*(L_loop + feed_length))


def pressure_drop_for_length(L_loop: float, D: float, p_per_m: float, feed: FeedLoss,
                             feed_length: float, fluid: FluidProperties, delta_t: float,
                             eps: float) -> float:
    return loop_state(L_loop, D, p_per_m, feed, feed_length, fluid, delta_t, eps).dp


def _bisect_length(dp_for_L, dp_target: float) -> float:
    L_lo, L_hi = 0.0, 1.0
    while dp_for_L(L_hi) < dp_target and L_hi < SEARCH_CAP_M:
        L_hi *= 2.0
    if L_hi >= SEARCH_CAP_M:
        logger.debug("Δp target %.0f Pa not bracketed below %.0f m", dp_target, SEARCH_CAP_M)

    for _ in range(BISECT_ITERS):
        L_mid = 0.5*(L_lo + L_hi)
        dp = dp_for_L(L_mid)
        if abs(dp - dp_target) < DP_TOLERANCE_PA:
            L_lo = L_hi = L_mid
            break
        if dp > dp_target:
            L_hi = L_mid
        else:
            L_lo = L_mid
    return min(L_hi, SEARCH_CAP_M)


def solve_max_length(diameter_mm: float, inp: CalculationInput,
                     fluid: Optional[FluidProperties] = None,
                     feed: Optional[FeedLoss] = None) -> DiameterResult:
    """Longest loop on this bore whose Δp (loop + feed run) meets the budget.

    Feed-run heat loss adds to the power the loop fluid carries; feed-run length
    adds to the hydraulic length, at the same bore and friction factor.
    """
    if fluid is None:
        fluid = resolve_fluid_properties(inp.fluid, inp.t_mean)
    D = diameter_mm/1000.0
    eps = inp.roughness_mm/1000.0
    demand = heat_demand(inp)
    if feed is None:
        ins = resolve_insulation(inp.insulation, inp.ins_lambda, inp.ins_thickness_mm)
        feed = feed_heat_loss(D, inp.t_mean, inp.t_air, ins, inp.feed_length)

    if demand.p_per_m <= 0:
        # no floor demand: nothing to size, the bore is heat-limited at zero length
        return DiameterResult(diameter_mm=diameter_mm, loop_length=0.0, total_length=inp.feed_length,
                              flow_lpm=0.0, loop_power=0.0, feed_power=feed.power,
                              total_power=feed.power, feed_loss_per_m=feed.q_per_m, area=0.0,
                              velocity=0.0, reynolds=0.0, friction_factor=0.0, dp_kpa=0.0,
                              limited=LIMITED_HEAT)

    def dp_for_L(L_loop: float) -> float:
        return pressure_drop_for_length(L_loop, D, demand.p_per_m, feed, inp.feed_length,
                                        fluid, inp.delta_t, eps)

    L_loop = _bisect_length(dp_for_L, inp.dp_max_kpa*1000.0)
    state = loop_state(L_loop, D, demand.p_per_m, feed, inp.feed_length, fluid, inp.delta_t, eps)
    logger.debug("D=%s mm: L_loop=%.2f m, Re=%.0f, dp=%.0f Pa", diameter_mm, L_loop, state.Re, state.dp)

    return DiameterResult(
        diameter_mm=diameter_mm,
        loop_length=L_loop,
        total_length=L_loop + inp.feed_length,
        flow_lpm=state.flow*60.0*1000.0,
        loop_power=demand.p_per_m*L_loop,
        feed_power=feed.power,
        total_power=state.power,
        feed_loss_per_m=feed.q_per_m,
        area=L_loop*demand.step,
        velocity=state.velocity,
        reynolds=state.Re,
        friction_factor=state.f,
        dp_kpa=state.dp/1000.0,
        limited=LIMITED_HYDRAULIC,
    )
