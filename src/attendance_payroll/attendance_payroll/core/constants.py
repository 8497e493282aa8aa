"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DEFAULT_FIXED_OT_THRESHOLD_HOURS = 8.0
DEFAULT_BREAK_DEDUCTION_HOURS = 0.0
DEFAULT_HOURLY_BASE_DIVISOR = 8
HALF_DAY_DEDUCTION = "0.5"
FULL_DAY_DEDUCTION = "1"
