from __future__ import annotations

from flask import Flask, flash, jsonify, render_template, request

from ..common.datetime_utils import format_iso_date, parse_iso_date, today_local
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    calendar = container.calendar_service

    def _requested_month() -> tuple[int, int]:
        """(year, 0-indexed month) from ?year=&month= (1-12), defaulting to today."""
        year, month = calendar.current_month(today_local())
        year_s = request.args.get("year")
        month_s = request.args.get("month")
        try:
            if year_s:
                year = int(year_s)
            if month_s:
                month = int(month_s) - 1
        except ValueError:
            raise ValidationError("Invalid year or month")
        if not 0 <= month <= 11:
            raise ValidationError("Month must be between 1 and 12")
        return year, month

    @app.route("/", methods=["GET"], endpoint="calendar_index")
    def calendar_index():
        try:
            year, month = _requested_month()
            view = calendar.month_view(year, month)
        except ValidationError as e:
            flash(str(e), "warning")
            view = calendar.month_view(*calendar.current_month(today_local()))

        return render_template(
            "calendar.html",
            view=view,
            weekdays=["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
            today=format_iso_date(today_local()),
        )

    @app.route("/api/days/<day>", methods=["GET"], endpoint="api_day_details")
    def api_day_details(day: str):
        try:
            parsed = parse_iso_date(day)
        except ValueError:
            return jsonify({"success": False, "message": "Invalid date (YYYY-MM-DD)"}), 400
        return jsonify(calendar.day_tile(parsed).to_dict())

    @app.route("/api/overtime", methods=["GET"], endpoint="api_overtime")
    def api_overtime():
        try:
            year, month = _requested_month()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(
            {
                "year": year,
                "month": month + 1,
                "total_overtime_hours": calendar.total_overtime(year, month),
            }
        )
