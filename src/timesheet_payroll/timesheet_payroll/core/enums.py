from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Normalized attendance state of one employee on one day."""

    UNSELECTED = "unselected"
    NORMAL = "normal"
    LATE = "late"
    EARLY_LEAVE = "earlyLeave"
    OVERTIME = "overtime"
    FULL_DAY_LEAVE = "fullDayLeave"
    HALF_DAY_LEAVE = "halfDayLeave"
    WEEKEND_OVERTIME = "weekendOvertime"


class EmployeeType(str, Enum):
    """Compensation policy kind used by the payroll calculators."""

    FULLTIME = "fulltime"
    INTERN = "intern"


PRESENT_STATUSES = frozenset(
    {
        AttendanceStatus.NORMAL,
        AttendanceStatus.LATE,
        AttendanceStatus.EARLY_LEAVE,
        AttendanceStatus.OVERTIME,
        AttendanceStatus.HALF_DAY_LEAVE,
    }
)
