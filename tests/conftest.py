from __future__ import annotations

import csv
import io
from datetime import date
from typing import Optional, Sequence

import pytest

from src.timesheet_payroll.timesheet_payroll.history.model import HistoryRecord

LEADING_COLUMNS = ["姓名", "部门", "工号"]
WEEKDAYS = ["星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"]


def build_export(
    dates: Sequence[str],
    rows: Sequence[tuple[str, Sequence[str]]],
    *,
    marker: str = "每日考勤结果",
    weekday_for: Optional[dict[str, str]] = None,
) -> str:
    """Build a vendor-style export: two header rows, then one row per employee."""

    header1 = LEADING_COLUMNS + [marker] + [""] * (len(dates) - 1)
    header2 = [""] * len(LEADING_COLUMNS)
    for d in dates:
        weekday = (weekday_for or {}).get(d) or WEEKDAYS[date.fromisoformat(d).weekday()]
        header2.append(f"{d} {weekday}")

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(header1)
    writer.writerow(header2)
    for name, notes in rows:
        writer.writerow([name, "研发部", "E001"] + list(notes))
    return out.getvalue()


@pytest.fixture
def make_export():
    return build_export


class InMemoryHistory:
    def __init__(self):
        self._records: dict[str, HistoryRecord] = {}

    def list_all(self):
        return list(self._records.values())

    def get_by_id(self, record_id: str) -> Optional[HistoryRecord]:
        return self._records.get(record_id)

    def upsert(self, record: HistoryRecord) -> None:
        self._records[record.record_id] = record

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


@pytest.fixture
def history_repo():
    return InMemoryHistory()
