from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeType


@dataclass(frozen=True)
class AttendanceStats:
    """Derived monthly figures; always recomputed from the attendance days."""

    present_days: int = 0
    overtime_hours: float = 0.0
    leave_hours: float = 0.0

    def to_dict(self) -> dict:
        return {
            "presentDays": self.present_days,
            "overtimeHours": self.overtime_hours,
            "leaveHours": self.leave_hours,
        }


@dataclass(frozen=True)
class CompensationPolicy:
    employee_type: EmployeeType
    monthly_salary: Optional[float] = None
    daily_salary: Optional[float] = None


@dataclass(frozen=True)
class SalaryBreakdown:
    base_salary: float
    added_salary: float
    leave_deduct_salary: float
    total_salary: float

    def to_dict(self) -> dict:
        return {
            "baseSalary": self.base_salary,
            "addedSalary": self.added_salary,
            "leaveDeductSalary": self.leave_deduct_salary,
            "totalSalary": self.total_salary,
        }
