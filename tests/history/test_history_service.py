from datetime import datetime

import pytest

from src.timesheet_payroll.timesheet_payroll.core.enums import AttendanceStatus
from src.timesheet_payroll.timesheet_payroll.core.exceptions import NotFoundError, ValidationError
from src.timesheet_payroll.timesheet_payroll.history.service import HistoryService

DATA_SOURCE = [
    {"id": "1", "name": "张三", "attendance": {"2025-03-03": {"status": "late", "lateMinutes": 10}}},
    {"id": "2", "name": "李四", "attendance": {}},
]


def _payload(**overrides):
    payload = {
        "recordId": "r1",
        "monthDisplay": "2025年03月",
        "year": 2025,
        "monthValue": 3,
        "dataSource": DATA_SOURCE,
        "importTime": "2025-04-01T09:00:00.000Z",
    }
    payload.update(overrides)
    return payload


def _service(repo):
    return HistoryService(repo, clock=lambda: datetime(2025, 4, 2, 12, 0, 0))


def test_save_defaults_employee_count_and_import_time(history_repo):
    record = _service(history_repo).save(_payload(importTime=None))

    assert record.employee_count == 2
    assert record.import_time == "2025-04-02 12:00:00"
    assert history_repo.get_by_id("r1") == record


def test_save_replaces_existing_record(history_repo):
    service = _service(history_repo)
    service.save(_payload())
    service.save(_payload(dataSource=DATA_SOURCE[:1]))

    records = service.list_records()
    assert len(records) == 1
    assert records[0].employee_count == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"recordId": ""},
        {"dataSource": []},
        {"dataSource": None},
        {"dataSource": {"a": 1}},
        {"monthValue": 13},
        {"employeeCount": "abc"},
        {"employeeCount": -1},
    ],
)
def test_save_validates_payload(history_repo, overrides):
    with pytest.raises(ValidationError):
        _service(history_repo).save(_payload(**overrides))


def test_list_records_newest_first(history_repo):
    service = _service(history_repo)
    service.save(_payload(recordId="old", importTime="2025-01-01 08:00:00"))
    service.save(_payload(recordId="new", importTime="2025-05-01T08:00:00.000Z"))
    service.save(_payload(recordId="mid", importTime="2025-03-01 08:00:00"))

    assert [r.record_id for r in service.list_records()] == ["new", "mid", "old"]


def test_get_and_delete_missing_record(history_repo):
    service = _service(history_repo)
    with pytest.raises(NotFoundError):
        service.get("nope")
    with pytest.raises(NotFoundError):
        service.delete("nope")


def test_delete(history_repo):
    service = _service(history_repo)
    service.save(_payload())
    service.delete("r1")
    assert service.list_records() == []


def test_load_monthly_rebuilds_full_month(history_repo):
    service = _service(history_repo)
    service.save(_payload())

    monthly = service.load_monthly("r1")

    assert [e.name for e in monthly.employees] == ["张三", "李四"]
    assert monthly.employees[0].day(3).status == AttendanceStatus.LATE
    assert len(monthly.employees[1].days) == 31
