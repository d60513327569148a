"""Status classifier for vendor attendance notes.

Each rule inspects the raw cell text and either returns an AttendanceDay or
None to pass the cell on. Rules are tried in a fixed order and the first
result wins, because vendor keywords overlap (a rest-day cell can also
mention a normal punch, a leave cell can mention a morning window, ...).
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from ..common.datetime_utils import normalize_clock, to_minutes
from ..core.constants import (
    DEFAULT_EARLY_LEAVE_TIME,
    FULL_DAY_WEEKEND_OVERTIME_MINUTES,
    WORK_END_AFTERNOON,
    WORK_END_MORNING,
    WORK_START_AFTERNOON,
    WORK_START_MORNING,
)
from ..core.enums import AttendanceStatus
from .model import AttendanceDay

PLACEHOLDER = "-"

REST_MARKER = "休息"
LEAVE_MARKER = "请假"
FULL_DAY_LEAVE_MARKERS = ("事假(全天)", "病假(全天)")
MORNING_MARKER = "上午"
AFTERNOON_MARKER = "下午"
MISSED_PUNCH_MARKER = "缺卡"
EARLY_LEAVE_MARKER = "早退"
NORMAL_MARKER = "正常"
FIELD_WORK_MARKER = "外勤"

REST_PUNCH_RE = re.compile(r"休息打卡\(\s*(\d{1,2}:\d{2})\s*,\s*(\d{1,2}:\d{2})\s*\)")
LATE_RE = re.compile(r"(?:迟到|严重迟到)(\d+)分钟\(([\d:]+)\)")
PAREN_RE = re.compile(r"\(([^()]*)\)")
CLOCK_RE = re.compile(r"\d{1,2}:\d{2}")

Rule = Callable[[str], Optional[AttendanceDay]]


def _empty(notes: str) -> Optional[AttendanceDay]:
    if not notes.strip() or notes.strip() == PLACEHOLDER:
        return AttendanceDay.unselected()
    return None


def _rest_day(notes: str) -> Optional[AttendanceDay]:
    if REST_MARKER not in notes:
        return None

    m = REST_PUNCH_RE.search(notes)
    start = normalize_clock(m.group(1)) if m else None
    end = normalize_clock(m.group(2)) if m else None
    if start is None or end is None:
        return AttendanceDay.unselected()

    # Raw clock difference, no lunch break.
    worked = to_minutes(end) - to_minutes(start)
    return AttendanceDay(
        status=AttendanceStatus.WEEKEND_OVERTIME,
        overtime_start=start,
        overtime_end=end,
        is_full_day_weekend_overtime=worked >= FULL_DAY_WEEKEND_OVERTIME_MINUTES,
    )


def _leave(notes: str) -> Optional[AttendanceDay]:
    if LEAVE_MARKER not in notes:
        return None

    if any(marker in notes for marker in FULL_DAY_LEAVE_MARKERS):
        return AttendanceDay(status=AttendanceStatus.FULL_DAY_LEAVE)
    if MORNING_MARKER in notes:
        return AttendanceDay(
            status=AttendanceStatus.HALF_DAY_LEAVE,
            leave_start=WORK_START_MORNING,
            leave_end=WORK_END_MORNING,
        )
    if AFTERNOON_MARKER in notes:
        return AttendanceDay(
            status=AttendanceStatus.HALF_DAY_LEAVE,
            leave_start=WORK_START_AFTERNOON,
            leave_end=WORK_END_AFTERNOON,
        )
    return AttendanceDay(status=AttendanceStatus.FULL_DAY_LEAVE)


def _missed_punch(notes: str) -> Optional[AttendanceDay]:
    if MISSED_PUNCH_MARKER in notes:
        return AttendanceDay.unselected()
    return None


def _late(notes: str) -> Optional[AttendanceDay]:
    m = LATE_RE.search(notes)
    if not m:
        return None
    minutes = int(m.group(1))
    if minutes <= 0:
        return AttendanceDay(status=AttendanceStatus.NORMAL)
    return AttendanceDay(status=AttendanceStatus.LATE, late_minutes=minutes)


def _early_leave(notes: str) -> Optional[AttendanceDay]:
    if EARLY_LEAVE_MARKER not in notes:
        return None
    # Known precision loss: the export does not carry the real leave time.
    return AttendanceDay(status=AttendanceStatus.EARLY_LEAVE, early_leave_time=DEFAULT_EARLY_LEAVE_TIME)


def punch_times(notes: str) -> list[str]:
    """All clock tokens found inside parentheses, zero-padded, in order."""
    times: list[str] = []
    for group in PAREN_RE.findall(notes):
        for token in CLOCK_RE.findall(group):
            clock = normalize_clock(token)
            if clock is not None:
                times.append(clock)
    return times


def _normal(notes: str) -> Optional[AttendanceDay]:
    if NORMAL_MARKER not in notes:
        return None

    times = punch_times(notes)
    if len(times) >= 2:
        overtime = to_minutes(times[1]) - to_minutes(WORK_END_AFTERNOON)
        if overtime > 0:
            return AttendanceDay(status=AttendanceStatus.OVERTIME, overtime_minutes=overtime)
    return AttendanceDay(status=AttendanceStatus.NORMAL)


def _field_work(notes: str) -> Optional[AttendanceDay]:
    if FIELD_WORK_MARKER in notes:
        return AttendanceDay(status=AttendanceStatus.NORMAL)
    return None


RULES: tuple[Rule, ...] = (
    _empty,
    _rest_day,
    _leave,
    _missed_punch,
    _late,
    _early_leave,
    _normal,
    _field_work,
)


def classify(notes: Optional[str]) -> AttendanceDay:
    """Map one vendor cell to an AttendanceDay; unknown text is unselected."""
    text = notes or ""
    for rule in RULES:
        day = rule(text)
        if day is not None:
            return day
    return AttendanceDay.unselected()
