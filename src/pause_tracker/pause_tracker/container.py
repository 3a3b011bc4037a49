from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .core.constants import (
    DEFAULT_BREAK_THRESHOLD_MINUTES,
    DEFAULT_EMPLOYEES_FILE,
    DEFAULT_MAX_PENDING_UPDATES,
    DEFAULT_PAUSES_FILE,
)
from .employees.json_employee_directory import JsonEmployeeDirectory
from .pauses.classifier import ThresholdClassifier
from .pauses.history_query import HistoryQuery
from .pauses.json_pause_store import JsonPauseStore
from .pauses.service import PauseService
from .pauses.state_machine import PauseStateMachine


@dataclass(frozen=True)
class Container:
    employee_directory: JsonEmployeeDirectory
    pause_store: JsonPauseStore

    pause_service: PauseService
    history_query: HistoryQuery


def build_container(*, store_config: dict) -> Container:
    data_dir = Path(store_config.get("data_dir", "."))
    employees_file = Path(store_config.get("employees_file", DEFAULT_EMPLOYEES_FILE))
    pauses_file = Path(store_config.get("pauses_file", DEFAULT_PAUSES_FILE))
    if not employees_file.is_absolute():
        employees_file = data_dir / employees_file
    if not pauses_file.is_absolute():
        pauses_file = data_dir / pauses_file

    employee_directory = JsonEmployeeDirectory(employees_file)
    pause_store = JsonPauseStore(
        pauses_file,
        max_pending=int(store_config.get("max_pending", DEFAULT_MAX_PENDING_UPDATES)),
    )

    machine = PauseStateMachine(
        ThresholdClassifier(
            threshold_minutes=int(store_config.get("threshold_minutes", DEFAULT_BREAK_THRESHOLD_MINUTES)),
        )
    )
    pause_service = PauseService(pause_store, employee_directory, machine=machine)
    history_query = HistoryQuery(pause_store)

    return Container(
        employee_directory=employee_directory,
        pause_store=pause_store,
        pause_service=pause_service,
        history_query=history_query,
    )
