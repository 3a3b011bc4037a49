from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.pause_tracker.pause_tracker.employees.json_employee_directory import JsonEmployeeDirectory

DEMO_EMPLOYEES = [
    {"badgeId": "1234", "name": "Alice Martin"},
    {"badgeId": "2345", "name": "Bruno Petit"},
    {"badgeId": "3456", "name": "Chloé Bernard"},
    {"badgeId": "4567", "name": "David Moreau"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    cfg = dict(settings.STORE_CONFIG)

    path = Path(cfg["employees_file"])
    if not path.is_absolute():
        path = Path(cfg.get("data_dir", ".")) / path

    if path.exists():
        raise SystemExit(f"Employee directory already exists: {path} (remove it first to reseed)")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(DEMO_EMPLOYEES, indent=2, ensure_ascii=False), encoding="utf-8")

    loaded = JsonEmployeeDirectory(path).all()
    print(f"OK: Seeded {len(loaded)} employees -> {path}")


if __name__ == "__main__":
    main()
