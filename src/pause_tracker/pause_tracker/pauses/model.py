from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import parse_iso, to_iso
from ..core.enums import BreakClassification, ToggleStatus
from ..employees.model import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PauseRecord:
    """Domain entity: one finished break. Created once at break end, never mutated."""

    badge_id: str
    name: str
    start: datetime
    end: datetime
    duration_minutes: int
    classification: BreakClassification

    @property
    def over_threshold(self) -> bool:
        return self.classification == BreakClassification.OVER_THRESHOLD

    def to_dict(self) -> dict:
        return {
            "badgeId": self.badge_id,
            "name": self.name,
            "start": to_iso(self.start),
            "end": to_iso(self.end),
            "durationMinutes": self.duration_minutes,
            "overThreshold": self.over_threshold,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PauseRecord":
        """Build from the persisted layout.

        Records written by the previous service carry `matricule` and a
        `statusColor` of "red"/"green" instead of `badgeId`/`overThreshold`.
        """

        badge_id = data.get("badgeId", data.get("matricule"))
        if badge_id is None:
            raise ValueError("history record without badgeId")

        if "overThreshold" in data:
            over = bool(data["overThreshold"])
        else:
            over = data.get("statusColor") == "red"

        return cls(
            badge_id=str(badge_id),
            name=str(data.get("name", "")),
            start=parse_iso(str(data["start"])),
            end=parse_iso(str(data["end"])),
            duration_minutes=int(data["durationMinutes"]),
            classification=BreakClassification.OVER_THRESHOLD if over else BreakClassification.UNDER_THRESHOLD,
        )


@dataclass(frozen=True)
class PauseDocument:
    """The single persisted aggregate: active sessions plus the history log.

    `history` is newest first. Instances are immutable; transitions build a new one.
    """

    active: Mapping[str, datetime] = field(default_factory=dict)
    history: tuple[PauseRecord, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "active", MappingProxyType(dict(self.active)))
        object.__setattr__(self, "history", tuple(self.history))

    @classmethod
    def empty(cls) -> "PauseDocument":
        return cls()

    def active_since(self, badge_id: str) -> Optional[datetime]:
        """Start of the badge's break in progress, or None when the badge is idle."""
        return self.active.get(badge_id)

    def to_dict(self) -> dict:
        return {
            "active": {badge_id: to_iso(start) for badge_id, start in self.active.items()},
            "history": [r.to_dict() for r in self.history],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PauseDocument":
        """Build from parsed JSON. Missing sections become empty.

        Unreadable active entries and history records are skipped one by one
        so the rest of the document survives. Raises ValueError only when the
        top level is not an object.
        """

        if not isinstance(data, dict):
            raise ValueError("pause document must be a JSON object")

        raw_active = data.get("active") or {}
        raw_history = data.get("history") or []
        if not isinstance(raw_active, dict):
            logger.warning("Ignoring malformed active section: %r", raw_active)
            raw_active = {}
        if not isinstance(raw_history, list):
            logger.warning("Ignoring malformed history section: %r", raw_history)
            raw_history = []

        active: dict[str, datetime] = {}
        for badge_id, start in raw_active.items():
            try:
                active[str(badge_id)] = parse_iso(str(start))
            except ValueError:
                logger.warning("Skipping active entry %r with unreadable start %r", badge_id, start)

        history: list[PauseRecord] = []
        for item in raw_history:
            try:
                history.append(PauseRecord.from_dict(item))
            except (ValueError, TypeError, KeyError, AttributeError):
                logger.warning("Skipping malformed history record: %r", item)

        return cls(active=active, history=tuple(history))


@dataclass(frozen=True)
class BreakStarted:
    """Outcome of the Idle -> OnBreak transition."""

    employee: Employee
    start_time: datetime

    status = ToggleStatus.START

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "message": f"Break started for {self.employee.name} ({self.employee.badge_id})",
            "employee": self.employee.to_dict(),
            "startTime": to_iso(self.start_time),
        }


@dataclass(frozen=True)
class BreakEnded:
    """Outcome of the OnBreak -> Idle transition."""

    employee: Employee
    start_time: datetime
    end_time: datetime
    duration_minutes: int
    classification: BreakClassification

    status = ToggleStatus.END

    @property
    def over_threshold(self) -> bool:
        return self.classification == BreakClassification.OVER_THRESHOLD

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "message": f"Break ended for {self.employee.name} ({self.employee.badge_id})",
            "employee": self.employee.to_dict(),
            "startTime": to_iso(self.start_time),
            "endTime": to_iso(self.end_time),
            "durationMinutes": self.duration_minutes,
            "overThreshold": self.over_threshold,
        }


ToggleOutcome = Union[BreakStarted, BreakEnded]
