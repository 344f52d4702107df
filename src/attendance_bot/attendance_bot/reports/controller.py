from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..container import Container

logger = logging.getLogger(__name__)

SERVICE_NAME = "Geo Attendance Bot"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/status", methods=["GET"], endpoint="api_status")
    def api_status():
        office = container.geofence.office
        return jsonify(
            {
                "status": "ok",
                "timestamp": now_local().isoformat(timespec="seconds"),
                "service": SERVICE_NAME,
                "backend": container.backend.value,
                "office": {"name": office.name, "radius_m": office.radius_m},
            }
        )

    @app.route("/admin/stats", methods=["GET"], endpoint="admin_stats")
    def admin_stats():
        raw_date = request.args.get("date")
        try:
            today = parse_iso_date(raw_date) if raw_date else now_local().date()
        except ValueError:
            return jsonify({"success": False, "message": "date must be YYYY-MM-DD"}), 400

        try:
            return jsonify(container.report_service.stats(today=today))
        except Exception:
            logger.exception("Failed to build daily stats for %s", today)
            return jsonify({"success": False, "message": "Internal server error"}), 500
