import pytest

from src.timesheet_payroll.timesheet_payroll.core.constants import DEFAULT_DAILY_COLUMN
from src.timesheet_payroll.timesheet_payroll.core.exceptions import FormatError
from src.timesheet_payroll.timesheet_payroll.timesheet.header import locate_daily_column, parse_date_header
from src.timesheet_payroll.timesheet_payroll.timesheet.reader import read_timesheet


def test_locate_daily_column_finds_marker():
    assert locate_daily_column(["姓名", "部门", "每日考勤结果(2025-03)", ""]) == 2


def test_locate_daily_column_falls_back_to_default_offset():
    assert locate_daily_column(["姓名"] * 50) == DEFAULT_DAILY_COLUMN


def test_parse_date_header_skips_non_date_cells_without_stopping():
    row = ["", "", "2025-03-01 星期六", "小计", "2025-03-02 休息日", "", "2025-03-03 星期一"]
    columns = parse_date_header(row, 2)

    assert [(c.index, c.date, c.weekday) for c in columns] == [
        (2, "2025-03-01", "星期六"),
        (4, "2025-03-02", "休息日"),
        (6, "2025-03-03", "星期一"),
    ]


def test_read_timesheet_maps_notes_to_dates(make_export):
    text = make_export(
        ["2025-03-03", "2025-03-04"],
        [("张三", ["正常(08:55,19:20)", "请假(上午)"]), ("李四", ["-"])],
    )

    sheets = read_timesheet(text)

    assert [s.name for s in sheets] == ["张三", "李四"]
    assert sheets[0].daily_records[0].date == "2025-03-03"
    assert sheets[0].daily_records[0].weekday == "星期一"
    assert sheets[0].daily_records[0].notes == "正常(08:55,19:20)"
    assert sheets[0].daily_records[1].notes == "请假(上午)"
    # short row: the missing cell reads as empty
    assert sheets[1].daily_records[1].notes == ""


def test_read_timesheet_skips_rows_without_name(make_export):
    text = make_export(["2025-03-03"], [("", ["正常"]), ("王五", ["外勤"])])
    assert [s.name for s in read_timesheet(text)] == ["王五"]


def test_read_timesheet_without_date_header_is_format_error():
    text = "姓名,每日考勤结果\n,not a date\n张三,正常\n"
    with pytest.raises(FormatError):
        read_timesheet(text)
