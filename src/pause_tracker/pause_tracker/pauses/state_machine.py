from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import elapsed_milliseconds, round_minutes
from ..employees.model import Employee
from .classifier import ThresholdClassifier
from .model import BreakEnded, BreakStarted, PauseDocument, PauseRecord, ToggleOutcome


class PauseStateMachine:
    """Break toggle for a single badge: Idle <-> OnBreak.

    Pure: the result depends only on (document, employee, now). The given
    document is never modified; a new one is returned with the outcome.
    """

    def __init__(self, classifier: Optional[ThresholdClassifier] = None):
        self._classifier = classifier or ThresholdClassifier()

    def toggle(self, document: PauseDocument, employee: Employee, now: datetime) -> tuple[PauseDocument, ToggleOutcome]:
        start = document.active_since(employee.badge_id)
        if start is None:
            return self._start(document, employee, now)
        return self._end(document, employee, start, now)

    def _start(self, document: PauseDocument, employee: Employee, now: datetime):
        active = dict(document.active)
        active[employee.badge_id] = now
        return PauseDocument(active=active, history=document.history), BreakStarted(employee=employee, start_time=now)

    def _end(self, document: PauseDocument, employee: Employee, start: datetime, now: datetime):
        # Clock going backwards must not produce a negative duration.
        elapsed_ms = max(0, elapsed_milliseconds(start, now))
        duration = round_minutes(elapsed_ms)
        classification = self._classifier.classify(duration)

        record = PauseRecord(
            badge_id=employee.badge_id,
            name=employee.name,
            start=start,
            end=now,
            duration_minutes=duration,
            classification=classification,
        )

        active = dict(document.active)
        del active[employee.badge_id]
        next_doc = PauseDocument(active=active, history=(record,) + document.history)

        outcome = BreakEnded(
            employee=employee,
            start_time=start,
            end_time=now,
            duration_minutes=duration,
            classification=classification,
        )
        return next_doc, outcome
