"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Vendor CSV layout
DAILY_RESULTS_MARKER = "每日考勤结果"
DEFAULT_DAILY_COLUMN = 41
MIN_CSV_LINES = 3

# Work calendar (HH:MM)
WORK_START_MORNING = "09:00"
WORK_END_MORNING = "11:30"
WORK_START_AFTERNOON = "13:30"
WORK_END_AFTERNOON = "18:00"

# Fixed early-leave time; the vendor text does not carry the actual time.
DEFAULT_EARLY_LEAVE_TIME = "17:30"

FULL_DAY_WEEKEND_OVERTIME_MINUTES = 7 * 60

# Payroll policy
AVERAGE_PAID_DAYS_PER_MONTH = 21.75
HOURS_PER_WORKDAY = 7
OVERTIME_PREMIUM = 1.5

EXPORT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
