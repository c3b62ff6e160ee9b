# feed_loss.py — heat loss of the insulated supply/return run between manifold and loop
import math
from dataclasses import dataclass

from .defaults import (BORE_RADIUS_MIN_M, H_OUTSIDE, INS_LAMBDA_MIN, INS_THICKNESS_MIN_MM,
                       INSULATION_CUSTOM, INSULATION_PRESETS, LAMBDA_PIPE, PIPE_WALL_M)


@dataclass(frozen=True)
class InsulationSpec:
    lam: float     # W/(m·K)
    thk_m: float


@dataclass(frozen=True)
class FeedLoss:
    q_per_m: float   # W/m
    power: float     # W over the whole feed run


def resolve_insulation(kind: str, custom_lambda: float, custom_thickness_mm: float) -> InsulationSpec:
    if kind == INSULATION_CUSTOM:
        return InsulationSpec(lam=max(custom_lambda, INS_LAMBDA_MIN),
                              thk_m=max(custom_thickness_mm, INS_THICKNESS_MIN_MM)/1000.0)
    preset = INSULATION_PRESETS[kind]
    return InsulationSpec(lam=preset["lambda"], thk_m=preset["thk_m"])


def feed_loss_per_metre(D: float, T_mean_C: float, T_air_C: float, ins: InsulationSpec) -> float:
    """Concentric cylinders: pipe wall + insulation conduction, then outer film, in series [W/m]."""
    r_i = max(D/2.0, BORE_RADIUS_MIN_M)
    r1 = r_i + PIPE_WALL_M
    r2 = r1 + ins.thk_m
    dT = max(T_mean_C - T_air_C, 0.0)
    if not r2 > r_i:
        return 0.0
    R_wall = math.log(r1/r_i)/(2*math.pi*LAMBDA_PIPE)
    R_ins = math.log(r2/r1)/(2*math.pi*ins.lam)
    R_out = 1.0/(H_OUTSIDE*2*math.pi*r2)
    R_total = R_wall + R_ins + R_out
    return dT/R_total if R_total > 0 else 0.0


def feed_heat_loss(D: float, T_mean_C: float, T_air_C: float, ins: InsulationSpec,
                   feed_length: float) -> FeedLoss:
    q = feed_loss_per_metre(D, T_mean_C, T_air_C, ins)
    return FeedLoss(q_per_m=q, power=q*feed_length)
