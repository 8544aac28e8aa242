from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .attendance.controller import register as register_attendance
from .branches.controller import register as register_branches
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import SQL_DIR, apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .events.controller import register as register_events
from .logging_config import configure_logging
from .marks.controller import register as register_marks
from .settings import get_settings_module
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["AUTH_REQUIRED"] = bool(getattr(settings, "AUTH_REQUIRED", False))
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/api/*": {"origins": list(getattr(settings, "CORS_ORIGINS", []))}},
        supports_credentials=True,
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    app.extensions["uniconnect"] = container
    register_error_handlers(app)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "Welcome to Student Portal API"

    register_users(app, container)
    register_branches(app, container)
    register_students(app, container)
    register_teachers(app, container)
    register_marks(app, container)
    register_attendance(app, container)
    register_events(app, container)

    return app
