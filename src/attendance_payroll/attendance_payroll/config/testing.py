SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

OT_THRESHOLD_POLICY = "employee_shift"
FIXED_OT_THRESHOLD_HOURS = 8.0
BREAK_DEDUCTION_HOURS = 0.0
HOURLY_BASE_DIVISOR = 8
