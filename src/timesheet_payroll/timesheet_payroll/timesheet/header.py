from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import DAILY_RESULTS_MARKER, DEFAULT_DAILY_COLUMN
from .model import DateColumn

logger = logging.getLogger(__name__)

WEEKDAY_MARKER = "星期"
REST_DAY_MARKER = "休"


def locate_daily_column(header_row: Sequence[str]) -> int:
    """Index of the "daily attendance results" column block.

    Falls back to the vendor's usual position when the label has drifted.
    """

    for index, cell in enumerate(header_row):
        if DAILY_RESULTS_MARKER in cell:
            return index

    logger.warning(
        "Header label %r not found, falling back to column %d", DAILY_RESULTS_MARKER, DEFAULT_DAILY_COLUMN
    )
    return DEFAULT_DAILY_COLUMN


def is_date_cell(cell: str) -> bool:
    return bool(cell) and (WEEKDAY_MARKER in cell or REST_DAY_MARKER in cell)


def parse_date_header(header_row: Sequence[str], start: int) -> list[DateColumn]:
    columns: list[DateColumn] = []
    for index in range(start, len(header_row)):
        cell = (header_row[index] or "").strip()
        if not is_date_cell(cell):
            continue

        date_part, _, weekday = cell.partition(" ")
        columns.append(DateColumn(index=index, date=date_part, weekday=weekday.split(" ")[0]))
    return columns
