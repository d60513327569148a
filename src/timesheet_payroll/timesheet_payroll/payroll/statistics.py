"""Monthly attendance aggregation.

Totals are accumulated in whole minutes and converted to hours once, rounded
half-up to one decimal.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Optional

from ..common.datetime_utils import overlap_minutes, to_minutes
from ..core.constants import (
    FULL_DAY_WEEKEND_OVERTIME_MINUTES,
    WORK_END_AFTERNOON,
    WORK_END_MORNING,
    WORK_START_AFTERNOON,
    WORK_START_MORNING,
)
from ..core.enums import PRESENT_STATUSES, AttendanceStatus
from ..attendance.model import AttendanceDay
from .model import AttendanceStats

WORK_WINDOWS = (
    (to_minutes(WORK_START_MORNING), to_minutes(WORK_END_MORNING)),
    (to_minutes(WORK_START_AFTERNOON), to_minutes(WORK_END_AFTERNOON)),
)
END_OF_WORKDAY = to_minutes(WORK_END_AFTERNOON)


def minutes_to_hours(minutes: int) -> float:
    hours = Decimal(minutes) / Decimal(60)
    return float(hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def work_window_minutes(start: Optional[str], end: Optional[str]) -> int:
    """Minutes of [start, end] that fall inside the paid work windows."""
    s, e = to_minutes(start or ""), to_minutes(end or "")
    if s is None or e is None:
        return 0
    return sum(overlap_minutes(s, e, ws, we) for ws, we in WORK_WINDOWS)


def overtime_minutes(day: AttendanceDay) -> int:
    if day.status == AttendanceStatus.OVERTIME:
        return max(0, day.overtime_minutes or 0)

    if day.status == AttendanceStatus.WEEKEND_OVERTIME:
        start, end = to_minutes(day.overtime_start or ""), to_minutes(day.overtime_end or "")
        if start is None or end is None:
            return 0
        if day.is_full_day_weekend_overtime:
            return FULL_DAY_WEEKEND_OVERTIME_MINUTES + max(0, end - END_OF_WORKDAY)
        return max(0, end - start)

    return 0


def leave_minutes(day: AttendanceDay) -> int:
    if day.status == AttendanceStatus.HALF_DAY_LEAVE:
        return work_window_minutes(day.leave_start, day.leave_end)
    if day.status == AttendanceStatus.EARLY_LEAVE:
        return work_window_minutes(day.early_leave_time, WORK_END_AFTERNOON)
    if day.status == AttendanceStatus.LATE:
        return max(0, day.late_minutes or 0)
    return 0


def aggregate(days: Mapping[int, AttendanceDay], days_in_month: int) -> AttendanceStats:
    present = 0
    overtime_total = 0
    leave_total = 0

    for day_no in range(1, days_in_month + 1):
        day = days.get(day_no)
        if day is None:
            continue
        if day.status in PRESENT_STATUSES:
            present += 1
        overtime_total += overtime_minutes(day)
        leave_total += leave_minutes(day)

    return AttendanceStats(
        present_days=present,
        overtime_hours=minutes_to_hours(overtime_total),
        leave_hours=minutes_to_hours(leave_total),
    )
