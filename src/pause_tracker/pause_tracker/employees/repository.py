from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeDirectory(Protocol):
    """Read-only repository interface for employees.

    Note (DIP): the pause service depends on this interface, not on the JSON file.
    Callers validate the badge format before calling lookup.
    """

    def lookup(self, badge_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def all(self) -> Sequence[Employee]:
        raise NotImplementedError
