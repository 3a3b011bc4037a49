from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 6, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def employees_file(tmp_path):
    path = tmp_path / "employees.json"
    path.write_text(
        json.dumps(
            [
                {"badgeId": "1234", "name": "Alice"},
                {"badgeId": "5678", "name": "Bob"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def pauses_file(tmp_path):
    return tmp_path / "pauses.json"
