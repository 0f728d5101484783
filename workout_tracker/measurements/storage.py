# -*- coding: utf-8 -*-
"""Body measurements — per-user ledger, one entry per date, newest first."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..errors import ValidationError
from ..store import DocumentStore
from .models import MEASURE_FIELDS, measure_text

logger = logging.getLogger(__name__)

KIND = "measurements"

_DATE_FORMATS = ("%Y/%m/%d", "%Y.%m.%d", "%Y/%m/%d %H:%M", "%Y/%m/%d %H:%M:%S")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_date(value: str) -> Optional[datetime]:
    text = (value or "").strip()
    if not text:
        return None
    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _sort_key(entry: Mapping[str, Any]) -> Tuple[int, datetime]:
    # Unparseable dates sort after every real date.
    parsed = _parse_date(str(entry.get("date") or ""))
    if parsed is None:
        return (0, datetime.min)
    return (1, parsed)



def normalize_entry(raw: Mapping[str, Any]) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"date": raw.get("date")}
    for name in MEASURE_FIELDS:
        entry[name] = measure_text(raw.get(name))
    entry["memo"] = measure_text(raw.get("memo"))
    entry["updatedAt"] = _utc_now()
    return entry


class MeasurementLedger:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_entries(self, user: str) -> List[Dict[str, Any]]:
        data = self.store.load(KIND, user, fallback=[])
        if not isinstance(data, list):
            return []
        return [d for d in data if isinstance(d, dict)]

    def upsert(self, user: str, raw: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Insert or replace the entry for ``raw["date"]``.

        An existing entry for the same date is replaced in its slot; the whole
        ledger is then re-sorted newest first (stable for equal dates).
        """
        if not raw.get("date"):
            raise ValidationError("date required")
        entry = normalize_entry(raw)
        data = self.list_entries(user)
        idx = next((i for i, d in enumerate(data) if d.get("date") == entry["date"]), -1)
        if idx >= 0:
            data[idx] = entry
        else:
            data.append(entry)
        data.sort(key=_sort_key, reverse=True)
        self.store.save(KIND, user, data)
        return data

    def remove(self, user: str, date: str) -> List[Dict[str, Any]]:
        data = self.list_entries(user)
        kept = [d for d in data if d.get("date") != date]
        if len(kept) != len(data):
            logger.info("Removed %d measurement(s) dated %s for %s", len(data) - len(kept), date, user)
        self.store.save(KIND, user, kept)
        return kept
