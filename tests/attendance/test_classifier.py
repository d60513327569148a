import pytest

from src.timesheet_payroll.timesheet_payroll.attendance.classifier import classify, punch_times
from src.timesheet_payroll.timesheet_payroll.core.enums import AttendanceStatus


@pytest.mark.parametrize("notes", ["", "-", "   ", None, "无法识别的内容"])
def test_placeholder_and_unknown_text_is_unselected(notes):
    assert classify(notes).to_dict() == {"status": "unselected"}


def test_weekend_overtime_exactly_seven_hours_is_full_day():
    day = classify("休息打卡(09:00,16:00)")

    assert day.status == AttendanceStatus.WEEKEND_OVERTIME
    assert day.overtime_start == "09:00"
    assert day.overtime_end == "16:00"
    assert day.is_full_day_weekend_overtime is True


def test_weekend_overtime_under_seven_hours_is_not_full_day():
    day = classify("休息打卡(09:00,15:59)")

    assert day.status == AttendanceStatus.WEEKEND_OVERTIME
    assert day.is_full_day_weekend_overtime is False


def test_rest_day_without_punch_pair_is_unselected():
    assert classify("休息").status == AttendanceStatus.UNSELECTED


def test_rest_day_wins_over_leave_keyword():
    assert classify("休息打卡(09:00,12:00) 请假").status == AttendanceStatus.WEEKEND_OVERTIME


def test_morning_leave():
    assert classify("请假(上午)").to_dict() == {
        "status": "halfDayLeave",
        "leaveStart": "09:00",
        "leaveEnd": "11:30",
    }


def test_afternoon_leave():
    day = classify("请假(下午)")
    assert (day.status, day.leave_start, day.leave_end) == (AttendanceStatus.HALF_DAY_LEAVE, "13:30", "18:00")


@pytest.mark.parametrize("notes", ["请假 事假(全天)", "请假 病假(全天)", "请假"])
def test_full_day_leave(notes):
    assert classify(notes).to_dict() == {"status": "fullDayLeave"}


def test_missed_punch_is_unselected():
    assert classify("正常(09:00),缺卡").status == AttendanceStatus.UNSELECTED


def test_late_keeps_minutes_only():
    assert classify("迟到30分钟(09:35)").to_dict() == {"status": "late", "lateMinutes": 30}


def test_serious_late():
    assert classify("严重迟到75分钟(10:15)").late_minutes == 75


def test_early_leave_uses_fixed_time():
    assert classify("早退15分钟(17:45)").to_dict() == {"status": "earlyLeave", "earlyLeaveTime": "17:30"}


def test_normal_with_late_clock_out_is_overtime():
    assert classify("正常(08:55,19:20)").to_dict() == {"status": "overtime", "overtimeMinutes": 80}


def test_normal_with_separate_punches_is_overtime():
    assert classify("正常(08:55),正常(19:20)").overtime_minutes == 80


@pytest.mark.parametrize("notes", ["正常(08:55,17:59)", "正常(08:55,18:00)", "正常(08:55)", "正常"])
def test_normal_without_overtime(notes):
    assert classify(notes).to_dict() == {"status": "normal"}


def test_field_work_is_normal():
    assert classify("外勤(10:00)").status == AttendanceStatus.NORMAL


def test_punch_times_are_zero_padded():
    assert punch_times("正常(8:05),正常(19:00)") == ["08:05", "19:00"]


def test_classifier_is_deterministic():
    notes = "休息打卡(09:10,19:05)"
    assert classify(notes) == classify(notes)
    assert classify(notes).to_dict() == {
        "status": "weekendOvertime",
        "overtimeStart": "09:10",
        "overtimeEnd": "19:05",
        "isFullDayWeekendOvertime": True,
    }


def test_zero_minute_late_is_on_time():
    assert classify("迟到0分钟(09:00)").to_dict() == {"status": "normal"}
    assert classify("迟到0分钟(09:00),正常(09:00,18:30)").status == AttendanceStatus.NORMAL
