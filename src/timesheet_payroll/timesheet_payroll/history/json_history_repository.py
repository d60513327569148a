from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from .model import HistoryRecord
from .repository import HistoryRepository

logger = logging.getLogger(__name__)


class JsonFileHistoryRepository(HistoryRepository):
    """History store kept in a single JSON document: {"records": [...]}."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _read(self) -> list[dict]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("History file %s is not valid JSON, treating it as empty", self._path)
            return []
        records = data.get("records") if isinstance(data, dict) else None
        return list(records or [])

    def _write(self, records: list[dict]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump({"records": records}, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except Exception:
            os.unlink(tmp)
            raise

    def list_all(self) -> Sequence[HistoryRecord]:
        return [HistoryRecord.from_dict(r) for r in self._read()]

    def get_by_id(self, record_id: str) -> Optional[HistoryRecord]:
        for r in self._read():
            if str(r.get("id")) == record_id:
                return HistoryRecord.from_dict(r)
        return None

    def upsert(self, record: HistoryRecord) -> None:
        records = self._read()
        for i, r in enumerate(records):
            if str(r.get("id")) == record.record_id:
                records[i] = record.to_dict()
                break
        else:
            records.append(record.to_dict())
        self._write(records)

    def delete(self, record_id: str) -> bool:
        records = self._read()
        kept = [r for r in records if str(r.get("id")) != record_id]
        if len(kept) == len(records):
            return False
        self._write(kept)
        return True
