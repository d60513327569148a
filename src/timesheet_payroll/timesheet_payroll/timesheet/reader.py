from __future__ import annotations

import logging

from ..core.exceptions import FormatError
from .header import locate_daily_column, parse_date_header
from .model import DailyRecord, EmployeeTimesheet
from .tokenizer import split_fields, split_lines

logger = logging.getLogger(__name__)


def read_timesheet(text: str) -> list[EmployeeTimesheet]:
    """Parse a vendor attendance export into one EmployeeTimesheet per data row.

    Row 1 holds the column-block labels, row 2 the per-day
    "YYYY-MM-DD <weekday>" headers; every following row is one employee with
    the name in column 0.
    """

    lines = split_lines(text)
    header = split_fields(lines[0])
    header2 = split_fields(lines[1])

    start = locate_daily_column(header)
    columns = parse_date_header(header2, start)
    if not columns:
        raise FormatError(f"No per-day date header found from column {start}")

    timesheets: list[EmployeeTimesheet] = []
    for line_no, line in enumerate(lines[2:], start=3):
        values = split_fields(line)
        name = values[0].strip() if values else ""
        if not name:
            logger.debug("Skipping line %d: empty employee name", line_no)
            continue

        records = []
        for ordinal, column in enumerate(columns):
            cell_index = start + ordinal
            notes = values[cell_index].strip() if cell_index < len(values) else ""
            records.append(DailyRecord(date=column.date, weekday=column.weekday, notes=notes))

        timesheets.append(EmployeeTimesheet(name=name, daily_records=records))

    logger.info("Read %d employee rows across %d date columns", len(timesheets), len(columns))
    return timesheets
