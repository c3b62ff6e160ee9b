# defaults.py — input defaults, selection keys and model constants for the UFH loop sizer
from typing import Dict, List

# ---- Selection keys ----
FLUID_WATER = "water"
FLUID_PG30 = "pg30"          # propylene glycol 30 %
FLUIDS: List[str] = [FLUID_WATER, FLUID_PG30]

INSULATION_PE6 = "pe6"
INSULATION_PE9 = "pe9"
INSULATION_PE13 = "pe13"
INSULATION_CUSTOM = "custom"
INSULATIONS: List[str] = [INSULATION_PE6, INSULATION_PE9, INSULATION_PE13, INSULATION_CUSTOM]

MODE_BY_DELTA_T = "by_delta_t"   # q = h·(T_surf − T_air)
MODE_BY_FLUX = "by_flux"         # q given directly, W/m²
HEAT_MODES: List[str] = [MODE_BY_DELTA_T, MODE_BY_FLUX]

LIMITED_HYDRAULIC = "hydraulic"
LIMITED_HEAT = "heat"

# ---- Form defaults ----
DEFAULT_T_SURFACE = 29.0       # °C
DEFAULT_T_AIR = 22.0           # °C
DEFAULT_STEP_MM = 150.0
DEFAULT_DELTA_T = 5.0          # K, supply − return
DEFAULT_H_TOTAL = 10.0         # W/(m²·K), usual range 8–11
DEFAULT_DP_MAX_KPA = 20.0
DEFAULT_FEED_LENGTH = 10.0     # m
DEFAULT_FLUID = FLUID_WATER
DEFAULT_T_MEAN = 35.0          # °C
DEFAULT_ROUGHNESS_MM = 0.007   # PEX / PE-RT
DEFAULT_INSULATION = INSULATION_PE9
DEFAULT_INS_LAMBDA = 0.035     # W/(m·K)
DEFAULT_INS_THICKNESS_MM = 9.0
DEFAULT_HEAT_MODE = MODE_BY_DELTA_T
DEFAULT_Q_USER = 60.0          # W/m², typical 40–80

LAYING_STEPS_MM: List[int] = [100, 150, 200, 250, 300]
CANDIDATE_DIAMETERS_MM: List[float] = [10, 12, 13, 14, 16, 18]
DEFAULT_DIAMETERS_MM: List[float] = [10, 12, 13, 16]

# ---- Fluids ----
CP_WATER = 4180.0              # J/(kg·K)
MU_WATER_MIN = 0.00035         # Pa·s, floor for the viscosity polynomial
PG30_PROPS: Dict[str, float] = {"rho": 1030.0, "cp": 3800.0, "mu": 0.0023}

# ---- Feed pipe & insulation ----
INSULATION_PRESETS: Dict[str, Dict[str, float]] = {
    INSULATION_PE6:  {"lambda": 0.035, "thk_m": 0.006},
    INSULATION_PE9:  {"lambda": 0.035, "thk_m": 0.009},
    INSULATION_PE13: {"lambda": 0.035, "thk_m": 0.013},
}
INSULATION_LABELS: Dict[str, str] = {
    INSULATION_PE6:  "PE foam 6 mm (λ=0.035)",
    INSULATION_PE9:  "PE foam 9 mm (λ=0.035)",
    INSULATION_PE13: "PE foam 13 mm (λ=0.035)",
    INSULATION_CUSTOM: "Custom",
}
INS_LAMBDA_MIN = 0.005         # W/(m·K)
INS_THICKNESS_MIN_MM = 0.1

LAMBDA_PIPE = 0.40             # W/(m·K), PE / PEX / PE-RT
H_OUTSIDE = 8.0                # W/(m²·K)
PIPE_WALL_M = 0.002
BORE_RADIUS_MIN_M = 0.0015

# ---- Hydraulics & root finding ----
RE_LAMINAR = 2000.0
SEARCH_CAP_M = 1e6             # numerical search limit, not an installation limit
BISECT_ITERS = 60
DP_TOLERANCE_PA = 1.0
