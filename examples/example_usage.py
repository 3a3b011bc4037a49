"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the break logic lives in the services.
"""

import importlib
from datetime import timedelta

from config import get_settings_module

from src.pause_tracker.pause_tracker.common.datetime_utils import now_utc
from src.pause_tracker.pause_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=settings.STORE_CONFIG)

    start = now_utc()
    print(container.pause_service.toggle("1234", now=start).to_dict())
    print(container.pause_service.toggle("1234", now=start + timedelta(minutes=15)).to_dict())
    print([r.to_dict() for r in container.history_query.list()[:5]])


if __name__ == "__main__":
    main()
