from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from ..common.datetime_utils import now_local
from ..common.validators import require_int_in_range
from ..core.constants import EXPORT_TIME_FORMAT
from ..core.exceptions import FormatError, ValidationError
from ..payroll.service import PayrollService
from ..timesheet.reader import read_timesheet
from .assembler import assemble_month, rebuild_month
from .model import MonthlyAttendance

logger = logging.getLogger(__name__)

MONTH_DISPLAY_RE = re.compile(r"(\d{4})年(\d{2})月")


def decode_export(content: Union[str, bytes]) -> str:
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FormatError(f"CSV export is not valid UTF-8: {e}") from e


class AttendanceImportService:
    def __init__(
        self,
        payroll: Optional[PayrollService] = None,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._payroll = payroll or PayrollService()
        self._clock = clock

    def import_csv(self, content: Union[str, bytes], year: Any, month: Any) -> MonthlyAttendance:
        year = require_int_in_range(year, "year", 1900, 9999)
        month = require_int_in_range(month, "month", 1, 12)

        timesheets = read_timesheet(decode_export(content))
        monthly = assemble_month(timesheets, year, month, now=self._clock())
        logger.info(
            "Imported %d employees for %s (%d days)", len(monthly.employees), monthly.month_display, monthly.days_in_month
        )
        return monthly

    def load_export(self, payload: Mapping[str, Any]) -> MonthlyAttendance:
        """Re-import a previously exported JSON document."""
        if not isinstance(payload, Mapping):
            raise FormatError("Export document must be a JSON object")

        employees = payload.get("employees")
        if not isinstance(employees, list):
            raise FormatError("Export document is missing the employees array")

        year, month = self._resolve_month(payload)
        monthly = rebuild_month(employees, year, month, export_time=self._parse_export_time(payload.get("exportTime")))
        logger.info("Loaded %d employees for %s from export", len(monthly.employees), monthly.month_display)
        return monthly

    def export(self, monthly: MonthlyAttendance, *, with_statistics: bool = False) -> dict:
        data = monthly.to_dict()
        if not with_statistics:
            return data

        for out, employee in zip(data["employees"], monthly.employees):
            stats = self._payroll.statistics_for(employee, monthly.year, monthly.month)
            out["statistics"] = stats.to_dict()
        return data

    def _resolve_month(self, payload: Mapping[str, Any]) -> tuple[int, int]:
        if payload.get("year") and payload.get("monthValue"):
            try:
                return (
                    require_int_in_range(payload["year"], "year", 1900, 9999),
                    require_int_in_range(payload["monthValue"], "monthValue", 1, 12),
                )
            except ValidationError as e:
                raise FormatError(str(e)) from e

        m = MONTH_DISPLAY_RE.search(str(payload.get("monthDisplay") or ""))
        if m and 1 <= int(m.group(2)) <= 12:
            return int(m.group(1)), int(m.group(2))
        raise FormatError("Export document does not identify its year and month")

    def _parse_export_time(self, value: Any) -> datetime:
        if value:
            try:
                return datetime.strptime(str(value), EXPORT_TIME_FORMAT)
            except ValueError:
                logger.debug("Ignoring unparseable exportTime %r", value)
        return self._clock()
