from __future__ import annotations

import csv
import io

from ..common.datetime_utils import to_iso
from .model import PauseRecord
from .repository import PauseStore

CSV_FIELDS = ["badgeId", "name", "start", "end", "durationMinutes", "overThreshold"]


class HistoryQuery:
    """Read-only view of the break history, newest first."""

    def __init__(self, store: PauseStore):
        self._store = store

    def list(self) -> list[PauseRecord]:
        return list(self._store.read_only().history)

    def export_csv(self) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in self.list():
            writer.writerow(
                {
                    "badgeId": r.badge_id,
                    "name": r.name,
                    "start": to_iso(r.start),
                    "end": to_iso(r.end),
                    "durationMinutes": r.duration_minutes,
                    "overThreshold": "yes" if r.over_threshold else "no",
                }
            )
        return out.getvalue()
