# constants.py
import os

# --- Conversion Factors ---
KG_TO_LB = 2.20462

# --- Dynamic Tension Model ---
# Openness per string pattern: denser beds feel firmer at equal tension
PATTERN_OPENNESS = {
    "18x20": 0.0,
    "18x19": 0.3,
    "16x20": 0.6,
    "16x19": 1.0,
    "16x18": 1.5,
}
DEFAULT_PATTERN_OPENNESS = 0.5
OPENNESS_WEIGHT = 0.1

STIFFNESS_BASELINE_RA = 60
STIFFNESS_WEIGHT = 0.003

DT_CALIBRATION = 0.748  # Empirical alignment constant

# --- Inverse Solver ---
MIN_TENSION_LBS, MAX_TENSION_LBS = 10.0, 80.0
SEARCH_PRECISION_LBS = 0.01
ROUNDING_STEP = 0.5

# --- Tension Profiles (crosses = mains * ratio) ---
PROFILE_RATIOS = {
    "balanced": 1.0,
    "spin": 0.95,
    "control": 1.05,
}
PROFILES = list(PROFILE_RATIOS.keys())

# --- Form Defaults ---
DEFAULT_MAINS_LBS = 46.0
DEFAULT_CROSSES_LBS = 46.0
ALTERNATIVE_OFFSETS_LBS = [-2.0, -1.0, 0.0, 1.0, 2.0]

# --- Catalog ---
RACKET_DB_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "racket_database.csv")
IDENTITY_FIELDS = ["brand", "product", "version", "variant"]
NUMERIC_FIELDS = ["head_size", "mains", "crosses", "stiffness", "weight", "balance", "swingweight"]

LOG_LEVEL = os.environ.get("TENSION_CALC_LOG_LEVEL", "INFO").upper()
