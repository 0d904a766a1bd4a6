from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, request, url_for

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _month_of(entry_date: str) -> dict:
        try:
            day = container.entry_service.parse_entry_date(entry_date)
        except ValidationError:
            return {}
        return {"year": day.year, "month": day.month}

    @app.route("/entries", methods=["POST"], endpoint="save_entry")
    def save_entry():
        entry_date = request.form.get("entry_date", "")
        try:
            entry = container.entry_service.submit(
                entry_date,
                request.form.get("punch_in"),
                request.form.get("punch_out"),
                request.form.get("comment"),
            )
            if entry is None:
                flash("Punch-in, punch-out and comment are all required.", "warning")
            else:
                flash("Entry saved.", "success")
        except ValidationError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to save entry for %s", entry_date)
            flash("System error while saving the entry", "danger")
        return redirect(url_for("calendar_index", **_month_of(entry_date)))

    @app.route("/api/entries", methods=["GET"], endpoint="api_list_entries")
    def api_list_entries():
        return jsonify([e.to_dict() for e in container.entry_service.list_entries()])

    @app.route("/api/entries", methods=["POST"], endpoint="api_create_entry")
    def api_create_entry():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Request body must be a JSON object"}), 400

        try:
            entry = container.entry_service.submit(
                data.get("entryDate", ""),
                data.get("punchInTime"),
                data.get("punchOutTime"),
                data.get("comment"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Failed to save entry via API")
            return jsonify({"success": False, "message": "System error while saving the entry"}), 500

        if entry is None:
            return jsonify({"success": False, "message": "Punch-in, punch-out and comment are all required"}), 400
        return jsonify({"success": True, "entry": entry.to_dict()}), 201
