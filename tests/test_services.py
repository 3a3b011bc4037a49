from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

import pytest

from src.pause_tracker.pause_tracker.core.enums import ToggleStatus
from src.pause_tracker.pause_tracker.core.exceptions import InvalidIdentifier, StorageFailure, UnknownEmployee
from src.pause_tracker.pause_tracker.employees.model import Employee
from src.pause_tracker.pause_tracker.pauses.history_query import HistoryQuery
from src.pause_tracker.pause_tracker.pauses.json_pause_store import JsonPauseStore
from src.pause_tracker.pause_tracker.pauses.model import PauseDocument
from src.pause_tracker.pause_tracker.pauses.service import PauseService


@dataclass
class InMemoryEmployees:
    by_badge: dict[str, Employee]

    def lookup(self, badge_id: str) -> Optional[Employee]:
        return self.by_badge.get(badge_id)

    def all(self):
        return list(self.by_badge.values())


@dataclass
class _Session:
    store: "InMemoryPauseStore"
    document: PauseDocument
    closed: bool = False

    def commit(self, document: PauseDocument) -> None:
        self.closed = True
        self.store.commit(document)


@dataclass
class InMemoryPauseStore:
    document: PauseDocument = field(default_factory=PauseDocument.empty)
    fail_commit: bool = False
    loads: int = 0
    commits: int = 0

    def load_for_update(self) -> PauseDocument:
        self.loads += 1
        return self.document

    def commit(self, document: PauseDocument) -> None:
        if self.fail_commit:
            raise StorageFailure("disk full")
        self.commits += 1
        self.document = document

    def abort(self) -> None:
        pass

    @contextmanager
    def exclusive(self):
        session = _Session(self, self.load_for_update())
        try:
            yield session
        finally:
            if not session.closed:
                self.abort()

    def read_only(self) -> PauseDocument:
        return self.document


@pytest.fixture
def employees():
    return InMemoryEmployees({"1234": Employee(badge_id="1234", name="Alice")})


@pytest.mark.parametrize("badge_id", ["12a4", "123", "12345", "", None])
def test_invalid_badge_never_touches_store(employees, badge_id):
    store = InMemoryPauseStore()
    svc = PauseService(store, employees)

    with pytest.raises(InvalidIdentifier):
        svc.toggle(badge_id)

    assert store.loads == 0
    assert store.document == PauseDocument.empty()


def test_unknown_employee_never_touches_store(employees):
    store = InMemoryPauseStore()
    svc = PauseService(store, employees)

    with pytest.raises(UnknownEmployee):
        svc.toggle("9999")

    assert store.loads == 0


def test_start_then_end_pairs_up(employees, fixed_now):
    store = InMemoryPauseStore()
    svc = PauseService(store, employees)

    started = svc.toggle("1234", now=fixed_now)
    assert started.status == ToggleStatus.START
    assert svc.active_since("1234") == fixed_now

    ended = svc.toggle("1234", now=fixed_now + timedelta(minutes=15))
    assert ended.status == ToggleStatus.END
    assert ended.duration_minutes == 15

    assert svc.active_since("1234") is None
    assert len(store.document.history) == 1
    assert store.commits == 2


def test_failed_commit_leaves_document_unchanged(employees, fixed_now):
    store = InMemoryPauseStore(fail_commit=True)
    svc = PauseService(store, employees)

    with pytest.raises(StorageFailure):
        svc.toggle("1234", now=fixed_now)

    assert store.document == PauseDocument.empty()


def test_now_defaults_to_current_time(employees, fixed_now, monkeypatch):
    monkeypatch.setattr("src.pause_tracker.pause_tracker.pauses.service.now_utc", lambda: fixed_now)
    store = InMemoryPauseStore()

    outcome = PauseService(store, employees).toggle("1234")

    assert outcome.start_time == fixed_now


def test_history_query_lists_newest_first(employees, fixed_now):
    store = InMemoryPauseStore()
    svc = PauseService(store, employees)
    query = HistoryQuery(store)

    assert query.list() == []

    for i in range(3):
        start = fixed_now + timedelta(hours=i)
        svc.toggle("1234", now=start)
        svc.toggle("1234", now=start + timedelta(minutes=10 + i * 10))

    assert [r.duration_minutes for r in query.list()] == [30, 20, 10]
    assert [r.over_threshold for r in query.list()] == [True, False, False]

    lines = query.export_csv().splitlines()
    assert lines[0] == "badgeId,name,start,end,durationMinutes,overThreshold"
    assert lines[1].startswith("1234,Alice,2025-01-06T11:00:00.000Z,2025-01-06T11:30:00.000Z,30,yes")
    assert len(lines) == 4


def _race(svc, badge_id, n):
    barrier = threading.Barrier(n)
    outcomes = []
    lock = threading.Lock()

    def hit():
        barrier.wait()
        outcome = svc.toggle(badge_id)
        with lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=hit) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(10)
    return outcomes


def test_two_simultaneous_toggles_do_not_lose_a_transition(employees, pauses_file):
    store = JsonPauseStore(pauses_file)
    svc = PauseService(store, employees)

    outcomes = _race(svc, "1234", 2)

    assert sorted(o.status.value for o in outcomes) == ["end", "start"]
    doc = JsonPauseStore(pauses_file).read_only()
    assert doc.active_since("1234") is None
    assert len(doc.history) == 1


def test_odd_number_of_simultaneous_toggles_leaves_one_active_entry(employees, pauses_file):
    store = JsonPauseStore(pauses_file)
    svc = PauseService(store, employees)

    outcomes = _race(svc, "1234", 3)

    assert sorted(o.status.value for o in outcomes) == ["end", "start", "start"]
    doc = JsonPauseStore(pauses_file).read_only()
    assert list(doc.active) == ["1234"]
    assert len(doc.history) == 1


def test_naive_now_is_taken_as_utc(employees, fixed_now):
    store = InMemoryPauseStore()
    svc = PauseService(store, employees)

    started = svc.toggle("1234", now=fixed_now.replace(tzinfo=None))
    ended = svc.toggle("1234", now=fixed_now + timedelta(minutes=15))

    assert started.start_time == fixed_now
    assert ended.duration_minutes == 15
