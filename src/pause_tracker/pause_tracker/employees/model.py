from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee known by a 4-digit badge id.

    Note: Plain data object, loaded once from the directory and never mutated.
    """

    badge_id: str
    name: str

    def to_dict(self) -> dict:
        return {"badgeId": self.badge_id, "name": self.name}
