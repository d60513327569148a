from __future__ import annotations

from ..core.constants import MIN_CSV_LINES
from ..core.exceptions import FormatError


def split_fields(line: str) -> list[str]:
    """Split one CSV line into fields, honoring double-quoted fields.

    A doubled quote inside a quoted field is a literal quote. An unterminated
    quote keeps everything up to the end of the line in the current field.
    """

    fields: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                buf.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(buf))
            buf.clear()
        else:
            buf.append(ch)
        i += 1

    fields.append("".join(buf))
    return fields


def split_lines(text: str) -> list[str]:
    """Split the export into non-blank lines.

    Raises FormatError when there is not enough room for the two header rows
    and at least one data row.
    """

    if text.startswith("\ufeff"):
        text = text[1:]

    lines = [line.rstrip("\r") for line in text.split("\n")]
    lines = [line for line in lines if line.strip()]

    if len(lines) < MIN_CSV_LINES:
        raise FormatError(
            f"CSV export needs 2 header rows and at least 1 data row (got {len(lines)} non-blank lines)"
        )
    return lines
