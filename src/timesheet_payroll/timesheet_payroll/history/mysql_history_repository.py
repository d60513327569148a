from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import HistoryRecord
from .repository import HistoryRepository

_COLUMNS = "record_id, month_display, year, month_value, import_time, employee_count, data_source"


def _to_record(r: dict) -> HistoryRecord:
    raw = r.get("data_source") or "[]"
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    return HistoryRecord(
        record_id=str(r["record_id"]),
        month_display=r["month_display"],
        year=int(r["year"]),
        month_value=int(r["month_value"]),
        import_time=str(r["import_time"]),
        employee_count=int(r["employee_count"]),
        data_source=json.loads(raw),
    )


class MySQLHistoryRepository(HistoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[HistoryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM import_history")
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: str) -> Optional[HistoryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM import_history WHERE record_id=%s", (record_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: HistoryRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO import_history(record_id, month_display, year, month_value, import_time, employee_count, data_source)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    month_display=VALUES(month_display),
                    year=VALUES(year),
                    month_value=VALUES(month_value),
                    import_time=VALUES(import_time),
                    employee_count=VALUES(employee_count),
                    data_source=VALUES(data_source)
                """,
                (
                    record.record_id,
                    record.month_display,
                    record.year,
                    record.month_value,
                    record.import_time,
                    record.employee_count,
                    json.dumps(record.data_source, ensure_ascii=False),
                ),
            )

    def delete(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM import_history WHERE record_id=%s", (record_id,))
            return cur.rowcount > 0
