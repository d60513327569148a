import pytest

from src.timesheet_payroll.timesheet_payroll.attendance.model import AttendanceDay
from src.timesheet_payroll.timesheet_payroll.core.enums import AttendanceStatus
from src.timesheet_payroll.timesheet_payroll.payroll.statistics import (
    aggregate,
    leave_minutes,
    minutes_to_hours,
    overtime_minutes,
    work_window_minutes,
)

S = AttendanceStatus


def test_present_days_count_only_scheduled_presence():
    days = {
        1: AttendanceDay(status=S.NORMAL),
        2: AttendanceDay(status=S.LATE, late_minutes=5),
        3: AttendanceDay(status=S.EARLY_LEAVE, early_leave_time="17:30"),
        4: AttendanceDay(status=S.OVERTIME, overtime_minutes=30),
        5: AttendanceDay(status=S.HALF_DAY_LEAVE, leave_start="09:00", leave_end="11:30"),
        6: AttendanceDay(status=S.FULL_DAY_LEAVE),
        7: AttendanceDay(status=S.UNSELECTED),
        8: AttendanceDay(status=S.WEEKEND_OVERTIME, overtime_start="09:00", overtime_end="12:00",
                         is_full_day_weekend_overtime=False),
    }
    assert aggregate(days, 31).present_days == 5


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("09:00", "11:30", 150),
        ("13:30", "18:00", 270),
        ("17:30", "18:00", 30),
        ("08:00", "19:00", 420),
        ("11:00", "14:00", 60),
        ("12:00", "13:00", 0),
        (None, "18:00", 0),
    ],
)
def test_work_window_minutes(start, end, expected):
    assert work_window_minutes(start, end) == expected


def test_full_day_weekend_overtime_adds_time_after_six():
    day = AttendanceDay(status=S.WEEKEND_OVERTIME, overtime_start="09:00", overtime_end="19:30",
                        is_full_day_weekend_overtime=True)
    assert overtime_minutes(day) == 420 + 90


def test_full_day_weekend_overtime_ending_before_six_counts_seven_hours():
    day = AttendanceDay(status=S.WEEKEND_OVERTIME, overtime_start="08:00", overtime_end="16:00",
                        is_full_day_weekend_overtime=True)
    assert overtime_minutes(day) == 420


def test_partial_weekend_overtime_is_raw_duration():
    day = AttendanceDay(status=S.WEEKEND_OVERTIME, overtime_start="13:00", overtime_end="17:15",
                        is_full_day_weekend_overtime=False)
    assert overtime_minutes(day) == 255


def test_missing_optional_fields_contribute_nothing():
    assert overtime_minutes(AttendanceDay(status=S.OVERTIME)) == 0
    assert overtime_minutes(AttendanceDay(status=S.WEEKEND_OVERTIME)) == 0
    assert leave_minutes(AttendanceDay(status=S.LATE)) == 0
    assert leave_minutes(AttendanceDay(status=S.HALF_DAY_LEAVE)) == 0


def test_leave_outside_work_windows_is_zero():
    day = AttendanceDay(status=S.HALF_DAY_LEAVE, leave_start="11:30", leave_end="13:30")
    assert leave_minutes(day) == 0


@pytest.mark.parametrize("minutes,hours", [(3, 0.1), (9, 0.2), (80, 1.3), (500, 8.3), (0, 0.0), (87, 1.5)])
def test_minutes_to_hours_rounds_half_up(minutes, hours):
    assert minutes_to_hours(minutes) == hours


def test_aggregate_totals_and_ignores_days_past_month_end():
    days = {
        1: AttendanceDay(status=S.OVERTIME, overtime_minutes=80),
        2: AttendanceDay(status=S.LATE, late_minutes=30),
        3: AttendanceDay(status=S.HALF_DAY_LEAVE, leave_start="13:30", leave_end="18:00"),
        30: AttendanceDay(status=S.OVERTIME, overtime_minutes=600),
    }

    stats = aggregate(days, 28)

    assert stats.present_days == 3
    assert stats.overtime_hours == 1.3
    assert stats.leave_hours == 5.0
