"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from seller_service.api.deps import json_response, timing
from seller_service.core.extensions import db
from seller_service.schemas import HealthSchema

bp = Blueprint("health", __name__)

health_schema = HealthSchema()


@bp.get("/health")
@timing
def healthcheck():
    """Return application and database health information."""

    db_status = "ok"
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:  # pragma: no cover - depends on DB backend
        current_app.logger.exception("healthcheck.db_error")
        db_status = "fail"
    status = 200 if db_status == "ok" else 503
    body = health_schema.dump({"status": "ok" if status == 200 else "degraded", "database": db_status})
    return json_response(body, status=status)
