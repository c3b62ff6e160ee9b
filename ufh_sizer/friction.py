# friction.py — Darcy friction factor for the loop and feed pipe
import math

from .defaults import RE_LAMINAR


def friction_factor(Re: float, eps: float, D: float) -> float:
    """Darcy f from Re, absolute roughness eps [m] and bore D [m].

    Laminar 64/Re below Re=2000, Swamee–Jain from 2000 up. There is no blending
    through the transitional range, so f jumps at Re=2000.
    Returns 0 for no flow (Re<=0 or D<=0) and NaN when the Swamee–Jain log
    argument is not a positive finite number.
    """
    if Re <= 0 or D <= 0:
        return 0.0
    if Re < RE_LAMINAR:
        return 64.0/Re
    term = eps/(3.7*D) + 5.74/(Re**0.9)
    if not (term > 0 and math.isfinite(term)):
        return math.nan
    lg = math.log10(term)
    if lg == 0:
        return math.nan
    return 0.25/(lg**2)
