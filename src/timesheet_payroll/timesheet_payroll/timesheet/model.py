from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DateColumn:
    """One per-day column of the vendor header ("2025-03-01 星期六")."""

    index: int
    date: str
    weekday: str


@dataclass(frozen=True)
class DailyRecord:
    """Raw cell of one employee on one day, before classification."""

    date: str
    weekday: str
    notes: str


@dataclass(frozen=True)
class EmployeeTimesheet:
    """One data row of the export: employee name + raw daily cells."""

    name: str
    daily_records: list[DailyRecord] = field(default_factory=list)
