from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import days_in_month
from ..core.constants import EXPORT_TIME_FORMAT
from ..core.enums import AttendanceStatus
from ..core.exceptions import FormatError

# dataclass field -> wire name used by the export/record shape
_WIRE_NAMES = {
    "late_minutes": "lateMinutes",
    "early_leave_time": "earlyLeaveTime",
    "overtime_minutes": "overtimeMinutes",
    "leave_start": "leaveStart",
    "leave_end": "leaveEnd",
    "overtime_start": "overtimeStart",
    "overtime_end": "overtimeEnd",
    "is_full_day_weekend_overtime": "isFullDayWeekendOvertime",
}


# fields each status may carry; anything else is dropped on reload
STATUS_FIELDS: dict[AttendanceStatus, tuple[str, ...]] = {
    AttendanceStatus.UNSELECTED: (),
    AttendanceStatus.NORMAL: (),
    AttendanceStatus.LATE: ("late_minutes",),
    AttendanceStatus.EARLY_LEAVE: ("early_leave_time",),
    AttendanceStatus.OVERTIME: ("overtime_minutes",),
    AttendanceStatus.FULL_DAY_LEAVE: (),
    AttendanceStatus.HALF_DAY_LEAVE: ("leave_start", "leave_end"),
    AttendanceStatus.WEEKEND_OVERTIME: ("overtime_start", "overtime_end", "is_full_day_weekend_overtime"),
}


def _parse_int(value: Any, wire: str) -> int:
    if isinstance(value, bool):
        raise FormatError(f"{wire} must be a whole number, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise FormatError(f"{wire} must be a whole number, got {value!r}") from e


def _parse_bool(value: Any, wire: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"true", "false"}:
        return text == "true"
    raise FormatError(f"{wire} must be true or false, got {value!r}")


@dataclass(frozen=True)
class AttendanceDay:
    """Normalized meaning of one attendance cell.

    Only the fields relevant to ``status`` are set; the rest stay None and are
    left out of ``to_dict()``.
    """

    status: AttendanceStatus = AttendanceStatus.UNSELECTED
    late_minutes: Optional[int] = None
    early_leave_time: Optional[str] = None
    overtime_minutes: Optional[int] = None
    leave_start: Optional[str] = None
    leave_end: Optional[str] = None
    overtime_start: Optional[str] = None
    overtime_end: Optional[str] = None
    is_full_day_weekend_overtime: Optional[bool] = None

    @classmethod
    def unselected(cls) -> "AttendanceDay":
        return cls(status=AttendanceStatus.UNSELECTED)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"status": self.status.value}
        for f in fields(self):
            if f.name == "status":
                continue
            value = getattr(self, f.name)
            if value is not None:
                out[_WIRE_NAMES[f.name]] = value
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceDay":
        """Read the wire shape back, keeping only the fields ``status`` allows.

        Raises FormatError for a field value of the wrong type.
        """
        try:
            status = AttendanceStatus(data.get("status") or AttendanceStatus.UNSELECTED.value)
        except ValueError:
            return cls.unselected()

        kwargs: dict[str, Any] = {}
        for attr in STATUS_FIELDS[status]:
            wire = _WIRE_NAMES[attr]
            value = data.get(wire)
            if value is None or value == "":
                continue
            if attr in {"late_minutes", "overtime_minutes"}:
                value = _parse_int(value, wire)
            elif attr == "is_full_day_weekend_overtime":
                value = _parse_bool(value, wire)
            else:
                value = str(value)
            kwargs[attr] = value
        return cls(status=status, **kwargs)


@dataclass(frozen=True)
class EmployeeAttendance:
    """One employee's month: identity plus a day-of-month keyed container."""

    employee_id: str
    name: str
    days: dict[int, AttendanceDay] = field(default_factory=dict)

    def day(self, day: int) -> AttendanceDay:
        return self.days.get(day) or AttendanceDay.unselected()

    def to_dict(self, year: int, month: int) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "name": self.name,
            "attendance": {
                f"{year:04d}-{month:02d}-{day:02d}": self.days[day].to_dict() for day in sorted(self.days)
            },
        }


@dataclass(frozen=True)
class MonthlyAttendance:
    year: int
    month: int
    export_time: datetime
    employees: list[EmployeeAttendance] = field(default_factory=list)

    @property
    def month_display(self) -> str:
        return f"{self.year:04d}年{self.month:02d}月"

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def to_dict(self) -> dict[str, Any]:
        return {
            "monthDisplay": self.month_display,
            "year": self.year,
            "monthValue": self.month,
            "exportTime": self.export_time.strftime(EXPORT_TIME_FORMAT),
            "employees": [e.to_dict(self.year, self.month) for e in self.employees],
        }
