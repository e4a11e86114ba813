from __future__ import annotations

import traceback
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.datetime_utils import format_iso_date, today_local
from ..common.validators import require_iso_date, require_number
from ..container import Container
from ..core.enums import SortOrder
from ..core.exceptions import ValidationError
from ..holidays.calculator import HolidayPay
from ..hours.state import SummaryState
from ..hours.view import LogFilters
from ..users.controller import login_required
from .model import LogEntry

_VIEW_ARGS = ("sort", "year", "month", "start", "end")


def _view_args(args) -> dict:
    """Query args that describe the history view, kept across form posts."""
    return {k: args.get(k) for k in _VIEW_ARGS if args.get(k)}


def register(app: Flask, container: Container) -> None:
    def current_user_id() -> int:
        return int(session["user_id"])

    def back_to_dashboard():
        return redirect(url_for("dashboard", **_view_args(request.args)))

    def load_state() -> SummaryState:
        return SummaryState.load(session, current_user_id())

    def store_state(state: SummaryState) -> None:
        state.save(session, current_user_id())

    def render_dashboard(*, editing: Optional[LogEntry] = None, holiday: Optional[HolidayPay] = None):
        sort = SortOrder.parse(request.args.get("sort"))
        filters = LogFilters.from_args(request.args)
        today = today_local()

        data = container.dashboard_service.build(
            user_id=current_user_id(),
            state=load_state(),
            today=today,
            sort=sort,
            filters=filters,
        )
        store_state(data.state)

        return render_template(
            "dashboard.html",
            name=session.get("name"),
            today=format_iso_date(today),
            data=data,
            sort=sort,
            next_sort=sort.toggled(),
            filters=filters,
            view_args=_view_args(request.args),
            editing=editing,
            holiday=holiday,
            active_page="dashboard",
        )

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        return render_dashboard()

    @app.route("/logs", methods=["POST"], endpoint="save_log")
    @login_required
    def save_log():
        log_id_s = (request.form.get("log_id") or "").strip()
        try:
            log_id = int(log_id_s) if log_id_s else None
        except ValueError:
            flash("Invalid log id", "warning")
            return back_to_dashboard()

        try:
            container.log_service.save_log(current_user_id(), request.form, log_id=log_id)
            store_state(load_state().logs_changed())
            flash("Log updated." if log_id else "Log added.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            traceback.print_exc()
            flash("System error while saving the log", "danger")
        return back_to_dashboard()

    @app.route("/logs/<int:log_id>/edit", endpoint="edit_log")
    @login_required
    def edit_log(log_id: int):
        try:
            entry = container.log_service.get_log(current_user_id(), log_id)
        except ValidationError as e:
            flash(str(e), "warning")
            return back_to_dashboard()

        store_state(load_state().logs_changed())
        return render_dashboard(editing=entry)

    @app.route("/logs/<int:log_id>/delete", methods=["POST"], endpoint="delete_log")
    @login_required
    def delete_log(log_id: int):
        try:
            remaining = container.log_service.delete_log(current_user_id(), log_id)
            state = load_state().logs_changed()
            if remaining == 0:
                state = state.collection_emptied()
            store_state(state)
            flash("Log deleted.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            traceback.print_exc()
            flash("System error while deleting the log", "danger")
        return back_to_dashboard()

    @app.route("/holiday-hours/calculate", methods=["POST"], endpoint="calculate_holiday_hours")
    @login_required
    def calculate_holiday_hours():
        holiday_s = (request.form.get("holiday_date") or "").strip()
        try:
            calc = container.holiday_calculator
            if holiday_s:
                holiday_date = require_iso_date(holiday_s, "Holiday date")
                result = calc.from_logs(container.log_service.list_logs(current_user_id()), holiday_date)
            else:
                result = calc.from_total(request.form.get("total_hours", ""))
        except ValidationError as e:
            flash(str(e), "warning")
            return back_to_dashboard()
        return render_dashboard(holiday=result)

    @app.route("/holiday-hours", methods=["POST"], endpoint="save_holiday_hours")
    @login_required
    def save_holiday_hours():
        try:
            hours = require_number(request.form.get("hours", ""), "Holiday hours")
            store_state(load_state().set_holiday_hours(hours))
            flash(f"Holiday hours saved: {hours:.2f} hours have been added to your weekly total.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        return back_to_dashboard()

    @app.route("/weekly-hours", methods=["POST"], endpoint="set_weekly_hours")
    @login_required
    def set_weekly_hours():
        try:
            state = load_state().set_weekly_hours(request.form.get("hours", ""))
            store_state(state)
            flash(f"This week's hours have been manually set to {state.weekly_override:.2f}.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        return back_to_dashboard()
