from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module
from .container import build_container, load_engine_settings
from .core.exceptions import DomainError

from .attendance.controller import register as register_attendance
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine_settings = load_engine_settings(settings)
    container = build_container(engine_settings=engine_settings)
    logger.info(
        "attendance-payroll settings=%s ot_policy=%s break_hours=%s",
        settings_module,
        engine_settings.ot_threshold_policy.value,
        engine_settings.break_deduction_hours,
    )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.warning("rejected request: %s: %s", e.kind, e)
        return jsonify({"error": e.kind, "message": str(e)}), 400

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)

    return app
