import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Overtime threshold: "employee_shift" uses each employee's daily hours,
# "fixed" uses FIXED_OT_THRESHOLD_HOURS for everyone
OT_THRESHOLD_POLICY = os.getenv("OT_THRESHOLD_POLICY", "employee_shift")
FIXED_OT_THRESHOLD_HOURS = float(os.getenv("FIXED_OT_THRESHOLD_HOURS", "8"))

# Unpaid break subtracted from every worked day before overtime
BREAK_DEDUCTION_HOURS = float(os.getenv("BREAK_DEDUCTION_HOURS", "0"))

HOURLY_BASE_DIVISOR = int(os.getenv("HOURLY_BASE_DIVISOR", "8"))
