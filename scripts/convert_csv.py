"""Convert a vendor attendance CSV export into the attendance JSON document.

Usage: python scripts/convert_csv.py export.csv 2025 3 [-o out.json] [--stats]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.timesheet_payroll.timesheet_payroll.attendance.service import AttendanceImportService
from src.timesheet_payroll.timesheet_payroll.common.logging_setup import configure_logging
from src.timesheet_payroll.timesheet_payroll.core.exceptions import DomainError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", type=Path)
    parser.add_argument("year", type=int)
    parser.add_argument("month", type=int)
    parser.add_argument("-o", "--output", type=Path, help="write JSON here instead of stdout")
    parser.add_argument("--stats", action="store_true", help="attach per-employee statistics")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    service = AttendanceImportService()
    try:
        monthly = service.import_csv(args.csv_path.read_bytes(), args.year, args.month)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    document = json.dumps(service.export(monthly, with_statistics=args.stats), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(document, encoding="utf-8")
        print(f"OK: {len(monthly.employees)} employees -> {args.output}")
    else:
        print(document)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
