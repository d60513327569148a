from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import days_in_month, now_local, parse_iso_date
from ..timesheet.model import EmployeeTimesheet
from .classifier import classify
from .model import AttendanceDay, EmployeeAttendance, MonthlyAttendance

logger = logging.getLogger(__name__)


def fill_month(days: Mapping[int, AttendanceDay], year: int, month: int) -> dict[int, AttendanceDay]:
    """Return a day-of-month map covering exactly 1..days_in_month."""
    total = days_in_month(year, month)
    return {day: days.get(day) or AttendanceDay.unselected() for day in range(1, total + 1)}


def _day_in_month(iso_date: str, year: int, month: int) -> Optional[int]:
    try:
        d = parse_iso_date(iso_date)
    except (TypeError, ValueError):
        return None
    if d.year != year or d.month != month:
        return None
    return d.day


def assemble_employee(
    timesheet: EmployeeTimesheet, *, employee_id: str, year: int, month: int
) -> EmployeeAttendance:
    days: dict[int, AttendanceDay] = {}
    for record in timesheet.daily_records:
        day = _day_in_month(record.date, year, month)
        if day is None:
            logger.debug("Skipping %s for %s: outside %04d-%02d", record.date, timesheet.name, year, month)
            continue
        days[day] = classify(record.notes)

    return EmployeeAttendance(employee_id=employee_id, name=timesheet.name, days=fill_month(days, year, month))


def assemble_month(
    timesheets: Sequence[EmployeeTimesheet],
    year: int,
    month: int,
    *,
    now: Optional[datetime] = None,
) -> MonthlyAttendance:
    """Classify every employee's notes into a full month of AttendanceDay values.

    Employees get their 1-based row position as id.
    """

    employees = [
        assemble_employee(ts, employee_id=str(index + 1), year=year, month=month)
        for index, ts in enumerate(timesheets)
    ]
    return MonthlyAttendance(year=year, month=month, export_time=now or now_local(), employees=employees)


def rebuild_employee(data: Mapping[str, Any], *, fallback_id: str, year: int, month: int) -> EmployeeAttendance:
    """Rebuild one exported employee ({id, name, attendance}) into the day container.

    Keys that are not ISO dates inside the month are skipped.
    """

    days: dict[int, AttendanceDay] = {}
    attendance = data.get("attendance") or {}
    if isinstance(attendance, Mapping):
        for key, detail in attendance.items():
            day = _day_in_month(str(key), year, month)
            if day is None or not isinstance(detail, Mapping):
                logger.debug("Skipping attendance key %r: outside %04d-%02d", key, year, month)
                continue
            days[day] = AttendanceDay.from_dict(detail)

    return EmployeeAttendance(
        employee_id=str(data.get("id") or fallback_id),
        name=str(data.get("name") or ""),
        days=fill_month(days, year, month),
    )


def rebuild_month(
    employees: Iterable[Mapping[str, Any]],
    year: int,
    month: int,
    *,
    export_time: Optional[datetime] = None,
) -> MonthlyAttendance:
    rebuilt = [
        rebuild_employee(emp, fallback_id=str(index + 1), year=year, month=month)
        for index, emp in enumerate(employees)
        if isinstance(emp, Mapping)
    ]
    return MonthlyAttendance(year=year, month=month, export_time=export_time or now_local(), employees=rebuilt)
