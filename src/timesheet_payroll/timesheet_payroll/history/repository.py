from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import HistoryRecord


class HistoryRepository(Protocol):
    def list_all(self) -> Sequence[HistoryRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[HistoryRecord]:
        raise NotImplementedError

    def upsert(self, record: HistoryRecord) -> None:
        """Insert the record or replace the one with the same id."""

        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError
