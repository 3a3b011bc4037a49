from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .pauses.controller import register as register_pauses


def create_app(*, settings_overrides: dict | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    store_config = dict(getattr(settings, "STORE_CONFIG"))
    store_config.update(settings_overrides or {})

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_container(store_config=store_config)
    app.extensions["pause_tracker"] = container

    if app.config["DEBUG"]:
        print(
            "[pause-tracker] settings=", settings_module,
            " employees=", container.employee_directory.path,
            " pauses=", container.pause_store.path,
        )

    if bool(store_config.get("auto_init", False)):
        created = container.pause_store.initialize()
        if app.config["DEBUG"] and created:
            print(f"[pause-tracker] created empty store at {container.pause_store.path}")

    register_pauses(app, container)

    return app
