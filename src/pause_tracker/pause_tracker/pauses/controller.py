from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_iso
from ..core.exceptions import StorageFailure, StoreBusy, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _storage_error(e: StorageFailure):
        if isinstance(e, StoreBusy):
            app.logger.warning("Pause store busy: %s", e)
            return jsonify({"error": "store busy"}), 503
        app.logger.exception("Pause store failure: %s", e)
        return jsonify({"error": "storage failure"}), 500

    @app.route("/pause", methods=["POST"], endpoint="pause_toggle")
    @app.route("/api/pause", methods=["POST"], endpoint="api_pause_toggle")
    def pause_toggle():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        # Older kiosks post `matricule`.
        badge_id = data.get("badgeId", data.get("matricule"))

        try:
            outcome = container.pause_service.toggle(badge_id)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StorageFailure as e:
            return _storage_error(e)

        return jsonify(outcome.to_dict()), 200

    @app.route("/pause/<badge_id>", methods=["GET"], endpoint="pause_status")
    def pause_status(badge_id: str):
        try:
            start = container.pause_service.active_since(badge_id)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StorageFailure as e:
            return _storage_error(e)

        return jsonify(
            {
                "badgeId": badge_id,
                "onBreak": start is not None,
                "startTime": to_iso(start) if start is not None else None,
            }
        ), 200

    @app.route("/history", methods=["GET"], endpoint="history")
    @app.route("/api/history", methods=["GET"], endpoint="api_history")
    def history():
        try:
            records = container.history_query.list()
        except StorageFailure as e:
            return _storage_error(e)
        return jsonify([r.to_dict() for r in records]), 200

    @app.route("/history.csv", methods=["GET"], endpoint="history_csv")
    def history_csv():
        try:
            text = container.history_query.export_csv()
        except StorageFailure as e:
            return _storage_error(e)

        return app.response_class(
            text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=pause_history.csv"},
        )

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        try:
            doc = container.pause_store.read_only()
        except StorageFailure as e:
            return _storage_error(e)
        return jsonify({"status": "ok", "active": len(doc.active), "records": len(doc.history)}), 200
