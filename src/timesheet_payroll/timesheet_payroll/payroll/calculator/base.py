from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import HOURS_PER_WORKDAY, OVERTIME_PREMIUM
from ..model import AttendanceStats, SalaryBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def base_salary(self, stats: AttendanceStats) -> float:
        raise NotImplementedError

    @abstractmethod
    def day_rate(self) -> float:
        """Pay for one standard workday, used for overtime and leave."""
        raise NotImplementedError

    def calculate(self, stats: AttendanceStats) -> SalaryBreakdown:
        rate = self.day_rate()
        base = self.base_salary(stats)
        added = (stats.overtime_hours / HOURS_PER_WORKDAY) * OVERTIME_PREMIUM * rate
        deduct = (stats.leave_hours / HOURS_PER_WORKDAY) * rate
        return SalaryBreakdown(
            base_salary=base,
            added_salary=added,
            leave_deduct_salary=deduct,
            total_salary=base + added - deduct,
        )
