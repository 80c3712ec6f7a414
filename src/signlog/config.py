# config.py
import os

# Logarithm base used by the transform and for tick spacing
DEFAULT_BASE = 10

# |x| below this is mapped linearly (x / LINEAR_THRESHOLD)
LINEAR_THRESHOLD = 10

# Approximate tick count for calc_nice_ticks and split number for calc_nice_extent
DEFAULT_APPROX_TICK_NUM = 10
DEFAULT_SPLIT_NUMBER = 5

# Hard cap on ticks per branch / per linear tick run
TICK_SAFE_LIMIT = 10000

# Fuzzy-equality tolerance for log alignment, scaled by the interval
ALIGN_TOLERANCE = 1e-6

# Decimal places used when re-rounding decoded tick values
DEFAULT_ROUND_PRECISION = 10

# CLI only; the library never configures logging handlers
LOG_LEVEL = os.getenv("SIGNLOG_LOG_LEVEL", "WARNING")
