from datetime import timedelta

import pytest

from src.pause_tracker.pause_tracker.core.enums import BreakClassification, ToggleStatus
from src.pause_tracker.pause_tracker.employees.model import Employee
from src.pause_tracker.pause_tracker.pauses.classifier import ThresholdClassifier
from src.pause_tracker.pause_tracker.pauses.model import BreakEnded, BreakStarted, PauseDocument
from src.pause_tracker.pause_tracker.pauses.state_machine import PauseStateMachine

ALICE = Employee(badge_id="1234", name="Alice")
BOB = Employee(badge_id="5678", name="Bob")


def test_idle_badge_starts_a_break(fixed_now):
    machine = PauseStateMachine()
    doc = PauseDocument.empty()

    next_doc, outcome = machine.toggle(doc, ALICE, fixed_now)

    assert isinstance(outcome, BreakStarted)
    assert outcome.status == ToggleStatus.START
    assert outcome.start_time == fixed_now
    assert next_doc.active == {"1234": fixed_now}
    assert next_doc.history == ()
    # Input document is left as it was.
    assert doc.active == {}


def test_break_in_progress_ends_and_is_recorded(fixed_now):
    machine = PauseStateMachine()
    doc, _ = machine.toggle(PauseDocument.empty(), ALICE, fixed_now)

    end = fixed_now + timedelta(minutes=15)
    next_doc, outcome = machine.toggle(doc, ALICE, end)

    assert isinstance(outcome, BreakEnded)
    assert outcome.status == ToggleStatus.END
    assert outcome.duration_minutes == 15
    assert outcome.over_threshold is False
    assert next_doc.active_since("1234") is None
    assert len(next_doc.history) == 1

    rec = next_doc.history[0]
    assert (rec.badge_id, rec.name, rec.start, rec.end) == ("1234", "Alice", fixed_now, end)
    assert rec.duration_minutes == 15
    assert rec.classification == BreakClassification.UNDER_THRESHOLD


@pytest.mark.parametrize(
    "elapsed, minutes, over",
    [
        (timedelta(minutes=20), 20, False),
        (timedelta(minutes=21), 21, True),
        (timedelta(minutes=25), 25, True),
        (timedelta(minutes=20, seconds=29, milliseconds=999), 20, False),
        (timedelta(minutes=20, seconds=30), 21, True),
        (timedelta(seconds=10), 0, False),
    ],
)
def test_duration_rounding_and_threshold(fixed_now, elapsed, minutes, over):
    machine = PauseStateMachine()
    doc = PauseDocument(active={"1234": fixed_now})

    _, outcome = machine.toggle(doc, ALICE, fixed_now + elapsed)

    assert outcome.duration_minutes == minutes
    assert outcome.over_threshold is over


def test_end_before_start_never_yields_negative_duration(fixed_now):
    machine = PauseStateMachine()
    doc = PauseDocument(active={"1234": fixed_now})

    _, outcome = machine.toggle(doc, ALICE, fixed_now - timedelta(minutes=3))

    assert outcome.duration_minutes == 0


def test_custom_threshold(fixed_now):
    machine = PauseStateMachine(ThresholdClassifier(threshold_minutes=10))
    doc = PauseDocument(active={"1234": fixed_now})

    _, outcome = machine.toggle(doc, ALICE, fixed_now + timedelta(minutes=11))

    assert outcome.classification == BreakClassification.OVER_THRESHOLD


def test_other_badges_are_untouched(fixed_now):
    machine = PauseStateMachine()
    doc = PauseDocument(active={"5678": fixed_now})

    started, _ = machine.toggle(doc, ALICE, fixed_now + timedelta(minutes=1))
    ended, _ = machine.toggle(started, ALICE, fixed_now + timedelta(minutes=5))

    assert started.active == {"5678": fixed_now, "1234": fixed_now + timedelta(minutes=1)}
    assert ended.active == {"5678": fixed_now}


def test_history_is_newest_first(fixed_now):
    machine = PauseStateMachine()
    doc = PauseDocument.empty()
    t = fixed_now
    for emp in (ALICE, BOB, ALICE):
        doc, _ = machine.toggle(doc, emp, t)
        t += timedelta(minutes=5)
        doc, _ = machine.toggle(doc, emp, t)
        t += timedelta(minutes=1)

    assert [r.badge_id for r in doc.history] == ["1234", "5678", "1234"]
    assert doc.history[0].end == t - timedelta(minutes=1)
    assert doc.active == {}


def test_toggle_is_deterministic(fixed_now):
    machine = PauseStateMachine()
    doc = PauseDocument(active={"1234": fixed_now})
    later = fixed_now + timedelta(minutes=7)

    assert machine.toggle(doc, ALICE, later) == machine.toggle(doc, ALICE, later)
