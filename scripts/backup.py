"""Backup the pause document.

Note: Takes the exclusive session while copying so the backup is never a
half-written file, even if the service is running in the same process.
For a running server in another process, the atomic replace on commit
already guarantees the copied file is a complete document.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.pause_tracker.pause_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_container(store_config=dict(settings.STORE_CONFIG)).pause_store

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"pauses_{ts}.json"

    with store.exclusive():
        if not store.path.exists():
            raise SystemExit(f"No pause document at {store.path}")
        shutil.copy2(store.path, out_file)

    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
