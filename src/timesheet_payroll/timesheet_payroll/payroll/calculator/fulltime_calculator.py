from __future__ import annotations

from ...core.constants import AVERAGE_PAID_DAYS_PER_MONTH
from ..model import AttendanceStats
from .base import PayrollCalculator


class FullTimePayrollCalculator(PayrollCalculator):
    """Monthly salary; overtime and leave priced at salary / 21.75 per day."""

    def __init__(self, monthly_salary: float):
        self._monthly_salary = float(monthly_salary)

    def base_salary(self, stats: AttendanceStats) -> float:
        return self._monthly_salary

    def day_rate(self) -> float:
        return self._monthly_salary / AVERAGE_PAID_DAYS_PER_MONTH
