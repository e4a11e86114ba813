from __future__ import annotations

import importlib
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .database.connection import DBConfig
from .logs.controller import register as register_logs
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))
    db_config = getattr(settings, "DB_CONFIG")

    if container is None:
        if app.config["DEBUG"]:
            print("[work-hours] settings=", settings_module, " db=", DBConfig.from_dict(db_config).describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            if app.config["DEBUG"]:
                print(f"[work-hours] schema ready (tables={len(list_tables(db_config))})")
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_users(db_config)
            if app.config["DEBUG"]:
                print("[work-hours] demo seed ready")

        container = build_container(db_config=db_config)

    app.extensions["work_hours"] = container

    register_users(app, container)
    register_logs(app, container)

    return app
