from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..attendance.model import EmployeeAttendance, MonthlyAttendance
from ..common.datetime_utils import days_in_month
from ..core.enums import EmployeeType
from ..core.exceptions import NotFoundError, ValidationError
from .calculator.factory import calculator_for
from .model import AttendanceStats, CompensationPolicy, SalaryBreakdown
from .statistics import aggregate


@dataclass(frozen=True)
class SalaryResult:
    employee_id: str
    name: str
    stats: AttendanceStats
    breakdown: SalaryBreakdown

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "statistics": self.stats.to_dict(),
            "salary": self.breakdown.to_dict(),
        }


def policy_from_payload(payload: Mapping[str, Any]) -> CompensationPolicy:
    """Build a CompensationPolicy from a request body.

    Rates are validated by the calculator factory; only the type is checked here.
    """

    raw_type = str(payload.get("employeeType") or EmployeeType.FULLTIME.value).strip().lower()
    try:
        employee_type = EmployeeType(raw_type)
    except ValueError:
        raise ValidationError(f"Unsupported employee type: {raw_type!r}") from None

    return CompensationPolicy(
        employee_type=employee_type,
        monthly_salary=payload.get("monthlySalary"),
        daily_salary=payload.get("dailySalary"),
    )


class PayrollService:
    def statistics_for(self, employee: EmployeeAttendance, year: int, month: int) -> AttendanceStats:
        return aggregate(employee.days, days_in_month(year, month))

    def salary_for(
        self,
        employee: EmployeeAttendance,
        year: int,
        month: int,
        policy: CompensationPolicy,
    ) -> SalaryResult:
        calculator = calculator_for(policy)
        stats = self.statistics_for(employee, year, month)
        return SalaryResult(
            employee_id=employee.employee_id,
            name=employee.name,
            stats=stats,
            breakdown=calculator.calculate(stats),
        )

    def find_employee(self, monthly: MonthlyAttendance, employee_id: Optional[str]) -> EmployeeAttendance:
        if not employee_id:
            raise ValidationError("employeeId is required")
        for employee in monthly.employees:
            if employee.employee_id == str(employee_id):
                return employee
        raise NotFoundError(f"Employee {employee_id} is not part of this month")

    def monthly_summary(self, monthly: MonthlyAttendance) -> list[dict]:
        rows = []
        for employee in monthly.employees:
            stats = self.statistics_for(employee, monthly.year, monthly.month)
            rows.append(
                {
                    "id": employee.employee_id,
                    "name": employee.name,
                    "presentDays": stats.present_days,
                    "leaveHours": stats.leave_hours,
                    "overtimeHours": stats.overtime_hours,
                }
            )
        return rows
