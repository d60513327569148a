from __future__ import annotations

from ..model import AttendanceStats
from .base import PayrollCalculator


class InternPayrollCalculator(PayrollCalculator):
    """Daily rate paid per present day."""

    def __init__(self, daily_salary: float):
        self._daily_salary = float(daily_salary)

    def base_salary(self, stats: AttendanceStats) -> float:
        return stats.present_days * self._daily_salary

    def day_rate(self) -> float:
        return self._daily_salary
