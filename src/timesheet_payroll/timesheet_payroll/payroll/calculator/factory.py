from __future__ import annotations

from ...common.validators import require_non_negative_rate
from ...core.enums import EmployeeType
from ...core.exceptions import ValidationError
from ..model import CompensationPolicy
from .base import PayrollCalculator
from .fulltime_calculator import FullTimePayrollCalculator
from .intern_calculator import InternPayrollCalculator


def calculator_for(policy: CompensationPolicy) -> PayrollCalculator:
    """Factory Pattern: choose the calculator matching the compensation policy."""
    if policy.employee_type == EmployeeType.FULLTIME:
        return FullTimePayrollCalculator(require_non_negative_rate(policy.monthly_salary, "monthlySalary"))
    if policy.employee_type == EmployeeType.INTERN:
        return InternPayrollCalculator(require_non_negative_rate(policy.daily_salary, "dailySalary"))
    raise ValidationError(f"Unsupported employee type: {policy.employee_type!r}")
