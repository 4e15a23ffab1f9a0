from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .arts.controller import register as register_arts
from .auth.guards import VERIFIER_KEY
from .common.logging import configure_logging, get_logger
from .companies.controller import register as register_companies
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .employee_skills.controller import register as register_employee_skills
from .employees.controller import register as register_employees
from .projects.controller import register as register_projects
from .skills.controller import register as register_skills
from .transactions.controller import register as register_transactions
from .web.errors import register_error_handlers

log = get_logger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    configure_logging(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        json_logs=bool(getattr(settings, "LOG_JSON", False)),
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            log.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            api_tokens=str(getattr(settings, "API_TOKENS", "")),
        )

    app.extensions[VERIFIER_KEY] = container.token_verifier

    register_error_handlers(app)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_companies(app, container)
    register_employees(app, container)
    register_arts(app, container)
    register_transactions(app, container)
    register_skills(app, container)
    register_employee_skills(app, container)
    register_projects(app, container)

    return app
