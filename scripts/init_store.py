from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.pause_tracker.pause_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=dict(settings.STORE_CONFIG))

    store = container.pause_store
    if store.initialize():
        print(f"OK: Created empty pause document -> {store.path}")
    else:
        doc = store.read_only()
        print(f"OK: Pause document already present -> {store.path} (active={len(doc.active)}, history={len(doc.history)})")


if __name__ == "__main__":
    main()
