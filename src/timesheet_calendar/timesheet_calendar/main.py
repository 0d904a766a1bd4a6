from __future__ import annotations

import importlib
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .entries.controller import register as register_entries
from .entries.repository import EntryStorage
from .calendar_view.controller import register as register_calendar

SETTING_NAMES = (
    "DEBUG",
    "TESTING",
    "STORAGE_PATH",
    "STORAGE_KEY",
    "WORK_START",
    "WORK_END",
    "CLASSIFICATION_POLICY",
)


def create_app(
    settings_module: Optional[str] = None,
    *,
    overrides: Optional[dict[str, Any]] = None,
    storage: Optional[EntryStorage] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    for name in SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config["DEBUG"] = bool(app.config.get("DEBUG", False))
    app.config.update(overrides or {})

    container = build_container(app_config=app.config, storage=storage)
    app.extensions["timesheet_container"] = container

    if app.config["DEBUG"]:
        app.logger.info(
            "[timesheet-calendar] settings=%s storage=%s key=%s entries=%d",
            settings_module,
            app.config.get("STORAGE_PATH"),
            container.entry_store.key,
            len(container.entry_store.entries),
        )

    register_calendar(app, container)
    register_entries(app, container)

    return app
