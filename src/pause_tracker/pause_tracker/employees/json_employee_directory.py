from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Optional, Sequence

from ..core.exceptions import StorageFailure
from .model import Employee

logger = logging.getLogger(__name__)


class JsonEmployeeDirectory:
    """Employee directory backed by a static JSON array of {badgeId, name}.

    The file is read once on first use. Entries written by the previous
    service use `matricule` instead of `badgeId`; both are accepted.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._by_badge: Optional[dict[str, Employee]] = None
        self._ordered: tuple[Employee, ...] = ()

    @property
    def path(self) -> Path:
        return self._path

    def lookup(self, badge_id: str) -> Optional[Employee]:
        return self._load().get(badge_id)

    def all(self) -> Sequence[Employee]:
        self._load()
        return list(self._ordered)

    def _load(self) -> dict[str, Employee]:
        if self._by_badge is not None:
            return self._by_badge

        with self._lock:
            if self._by_badge is None:
                ordered = self._read_file()
                by_badge: dict[str, Employee] = {}
                for emp in ordered:
                    by_badge.setdefault(emp.badge_id, emp)
                self._ordered = tuple(ordered)
                self._by_badge = by_badge
                logger.info("Loaded %d employees from %s", len(by_badge), self._path)
        return self._by_badge

    def _read_file(self) -> list[Employee]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageFailure(f"Cannot read employee directory {self._path}: {e}") from e

        if not isinstance(raw, list):
            raise StorageFailure(f"Employee directory {self._path} must be a JSON array")

        employees: list[Employee] = []
        for item in raw:
            emp = _to_employee(item)
            if emp is None:
                logger.warning("Skipping malformed employee entry in %s: %r", self._path, item)
                continue
            employees.append(emp)
        return employees


def _to_employee(item: Any) -> Optional[Employee]:
    if not isinstance(item, dict):
        return None
    badge_id = item.get("badgeId", item.get("matricule"))
    if badge_id is None:
        return None
    return Employee(badge_id=str(badge_id), name=str(item.get("name", "")))
