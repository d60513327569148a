from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..core.exceptions import FormatError


@dataclass(frozen=True)
class HistoryRecord:
    """A saved import session (one month of one CSV import)."""

    record_id: str
    month_display: str
    year: int
    month_value: int
    import_time: str
    employee_count: int
    data_source: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "monthDisplay": self.month_display,
            "year": self.year,
            "monthValue": self.month_value,
            "dataSource": self.data_source,
            "importTime": self.import_time,
            "employeeCount": self.employee_count,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HistoryRecord":
        try:
            return cls(
                record_id=str(data["id"]),
                month_display=str(data.get("monthDisplay") or ""),
                year=int(data.get("year") or 0),
                month_value=int(data.get("monthValue") or 0),
                import_time=str(data.get("importTime") or ""),
                employee_count=int(data.get("employeeCount") or 0),
                data_source=list(data.get("dataSource") or []),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise FormatError(f"Malformed history record: {e}") from e
