from __future__ import annotations

import importlib
import logging
import logging.config
from pathlib import Path
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_default_workers, list_tables
from .perimeter.controller import register as register_perimeter
from .shifts.controller import register as register_shifts
from .stats.controller import register as register_stats

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def logging_config(settings: ModuleType) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": getattr(settings, "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")},
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": getattr(settings, "LOG_LEVEL", "INFO"),
            "handlers": ["default"],
        },
    }


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.config.dictConfig(logging_config(settings))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    db_config = getattr(settings, "DB_CONFIG", None)
    storage_backend = getattr(settings, "STORAGE_BACKEND", "mysql")
    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    if container is None and storage_backend == "mysql":
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_default_workers(db_config)
            logger.info("Default workers ready")

    container = container or build_container(
        db_config=db_config,
        storage_backend=storage_backend,
        lock_timeout=float(getattr(settings, "LOCK_TIMEOUT_SECONDS", 5.0)),
    )
    app.extensions["careclock"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_shifts(app, container)
    register_perimeter(app, container)
    register_stats(app, container)

    return app
