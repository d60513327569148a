from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceImportService
from .database.connection import DBConfig, DatabaseConnection
from .history.json_history_repository import JsonFileHistoryRepository
from .history.mysql_history_repository import MySQLHistoryRepository
from .history.repository import HistoryRepository
from .history.service import HistoryService
from .payroll.service import PayrollService

HISTORY_BACKENDS = ("mysql", "json")


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    history_backend: str

    history_repo: HistoryRepository

    payroll_service: PayrollService
    attendance_import_service: AttendanceImportService
    history_service: HistoryService


def build_history_repository(
    backend: str, *, db_config: Optional[dict] = None, json_path: Optional[str] = None
) -> tuple[HistoryRepository, Optional[DatabaseConnection]]:
    if backend == "json":
        if not json_path:
            raise ValueError("HISTORY_JSON_PATH is required for the json history store")
        return JsonFileHistoryRepository(json_path), None

    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql history store")
        conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))
        return MySQLHistoryRepository(conn), conn

    raise ValueError(f"Unknown HISTORY_STORE {backend!r}, expected one of {HISTORY_BACKENDS}")


def build_container(
    *,
    history_backend: str = "mysql",
    db_config: Optional[dict] = None,
    json_path: Optional[str] = None,
    history_repo: Optional[HistoryRepository] = None,
) -> Container:
    conn = None
    if history_repo is None:
        history_repo, conn = build_history_repository(history_backend, db_config=db_config, json_path=json_path)

    payroll_service = PayrollService()
    attendance_import_service = AttendanceImportService(payroll_service)
    history_service = HistoryService(history_repo)

    return Container(
        conn=conn,
        history_backend=history_backend,
        history_repo=history_repo,
        payroll_service=payroll_service,
        attendance_import_service=attendance_import_service,
        history_service=history_service,
    )
