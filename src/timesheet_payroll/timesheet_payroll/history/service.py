from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping

from ..attendance.assembler import rebuild_month
from ..attendance.model import MonthlyAttendance
from ..common.datetime_utils import now_local
from ..common.validators import require_int_in_range, require_non_empty, require_non_negative_int
from ..core.constants import EXPORT_TIME_FORMAT
from ..core.exceptions import NotFoundError, ValidationError
from .model import HistoryRecord
from .repository import HistoryRepository


def _sort_key(record: HistoryRecord):
    try:
        return datetime.fromisoformat(record.import_time.replace("Z", "+00:00")).replace(tzinfo=None)
    except ValueError:
        return datetime.min


class HistoryService:
    def __init__(self, history: HistoryRepository, *, clock: Callable[[], datetime] = now_local):
        self._history = history
        self._clock = clock

    def save(self, payload: Mapping[str, Any]) -> HistoryRecord:
        record_id = payload.get("recordId")
        data_source = payload.get("dataSource")
        if not record_id or not data_source:
            raise ValidationError("recordId and dataSource are required")
        if not isinstance(data_source, list):
            raise ValidationError("dataSource must be a list of employees")

        year = require_int_in_range(payload.get("year"), "year", 1900, 9999)
        month = require_int_in_range(payload.get("monthValue"), "monthValue", 1, 12)

        record = HistoryRecord(
            record_id=require_non_empty(record_id, "recordId"),
            month_display=str(payload.get("monthDisplay") or f"{year:04d}年{month:02d}月"),
            year=year,
            month_value=month,
            import_time=str(payload.get("importTime") or self._clock().strftime(EXPORT_TIME_FORMAT)),
            employee_count=self._employee_count(payload.get("employeeCount"), data_source),
            data_source=data_source,
        )
        self._history.upsert(record)
        return record

    @staticmethod
    def _employee_count(value: Any, data_source: list) -> int:
        if value is None or value == "":
            return len(data_source)
        return require_non_negative_int(value, "employeeCount")

    def list_records(self) -> list[HistoryRecord]:
        return sorted(self._history.list_all(), key=_sort_key, reverse=True)

    def get(self, record_id: str) -> HistoryRecord:
        record = self._history.get_by_id(str(record_id))
        if not record:
            raise NotFoundError(f"History record {record_id} does not exist")
        return record

    def delete(self, record_id: str) -> None:
        if not self._history.delete(str(record_id)):
            raise NotFoundError(f"History record {record_id} does not exist")

    def load_monthly(self, record_id: str) -> MonthlyAttendance:
        record = self.get(record_id)
        return rebuild_month(record.data_source, record.year, record.month_value)
