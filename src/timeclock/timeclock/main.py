from __future__ import annotations

import importlib
import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .container import Container, build_container
from .core.enums import Weekday
from .catalog.controller import register as register_catalog
from .dashboard.controller import register as register_dashboard
from .jobs.controller import register as register_jobs
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_dir: str = "") -> None:
    """Attach handlers to the package logger once; repeated app creation is a no-op."""
    root = logging.getLogger(__package__)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if root.handlers:
        return

    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(stream)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, "timeclock.log"), when="D", interval=1, backupCount=30
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)


def create_app(container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_DIR", ""))
    logger.info("settings=%s", settings_module)

    if container is None:
        auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
        auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))
        root = Path(__file__).resolve().parents[3]
        if auto_init_db:
            apply_schema(db_config, schema_path=root / "database" / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if auto_seed_db:
            apply_seed_sql(db_config, seed_path=root / "database" / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            week_start=Weekday.parse(getattr(settings, "WEEK_START", "Sunday")),
            sync_staged_jobs=bool(getattr(settings, "SYNC_STAGED_JOBS", True)),
            jobs_page_size=int(getattr(settings, "JOBS_PAGE_SIZE", 100)),
        )

    register_users(app, container)
    register_dashboard(app, container)
    register_jobs(app, container)
    register_catalog(app, container)
    register_reports(app, container)

    return app
