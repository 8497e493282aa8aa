import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

OT_THRESHOLD_POLICY = os.getenv("OT_THRESHOLD_POLICY", "employee_shift")
FIXED_OT_THRESHOLD_HOURS = float(os.getenv("FIXED_OT_THRESHOLD_HOURS", "8"))
BREAK_DEDUCTION_HOURS = float(os.getenv("BREAK_DEDUCTION_HOURS", "0"))
HOURLY_BASE_DIVISOR = int(os.getenv("HOURLY_BASE_DIVISOR", "8"))
