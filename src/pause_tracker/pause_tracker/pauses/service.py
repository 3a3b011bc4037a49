from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_badge_id
from ..core.exceptions import UnknownEmployee
from ..employees.model import Employee
from ..employees.repository import EmployeeDirectory
from .model import ToggleOutcome
from .repository import PauseStore
from .state_machine import PauseStateMachine


class PauseService:
    """Use case: toggle a break for a badge.

    Guard clauses run before the store is touched; a rejected request never
    opens a session.
    """

    def __init__(
        self,
        store: PauseStore,
        employees: EmployeeDirectory,
        *,
        machine: Optional[PauseStateMachine] = None,
    ):
        self._store = store
        self._employees = employees
        self._machine = machine or PauseStateMachine()

    def toggle(self, badge_id: str, *, now: Optional[datetime] = None) -> ToggleOutcome:
        employee = self._require_employee(badge_id)

        with self._store.exclusive() as session:
            # Taken inside the session so commits carry non-decreasing times.
            at = now or now_utc()
            if at.tzinfo is None:
                at = at.replace(tzinfo=timezone.utc)
            next_doc, outcome = self._machine.toggle(session.document, employee, at)
            session.commit(next_doc)

        return outcome

    def active_since(self, badge_id: str) -> Optional[datetime]:
        """Start of the badge's break in progress, or None when idle."""
        employee = self._require_employee(badge_id)
        return self._store.read_only().active_since(employee.badge_id)

    def _require_employee(self, badge_id: str) -> Employee:
        badge_id = require_badge_id(badge_id)
        employee = self._employees.lookup(badge_id)
        if employee is None:
            raise UnknownEmployee("unknown employee")
        return employee
