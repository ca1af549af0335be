from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .backup.controller import register as register_backup
from .common.logging_config import setup_logging
from .config import get_settings_module
from .container import build_container
from .employees.controller import register as register_employees
from .incidents.controller import register as register_incidents
from .storage.local_storage import KeyValueStorage

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if not app.config["TESTING"]:
        setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(settings, storage=storage)
    app.extensions["attendance_points"] = container

    logger.info(
        "settings=%s data=%s auto_backup=%s probation_ncns=%s",
        settings_module,
        getattr(settings, "DATA_FILE", None) or "memory",
        container.store.auto_backup_enabled(),
        bool(getattr(settings, "ENFORCE_PROBATION_NCNS", False)),
    )

    register_employees(app, container)
    register_incidents(app, container)
    register_backup(app, container)

    return app
