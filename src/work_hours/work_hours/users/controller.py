from __future__ import annotations

import traceback
from functools import wraps

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import SESSION_HOLIDAY_CARRY
from ..core.exceptions import AuthenticationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(username, password)

                # Saved holiday hours are keyed by user id and outlive the sign-in.
                carries = session.get(SESSION_HOLIDAY_CARRY)
                session.clear()
                session.permanent = bool(remember)
                session["user_id"] = s_user.user_id
                session["name"] = s_user.full_name
                if carries is not None:
                    session[SESSION_HOLIDAY_CARRY] = carries

                flash("Signed in.", "success")
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                traceback.print_exc()
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error while signing in: {e}", "danger")
                else:
                    flash("System error while signing in", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        carries = session.get(SESSION_HOLIDAY_CARRY)
        session.clear()
        if carries is not None:
            session[SESSION_HOLIDAY_CARRY] = carries
        flash("Signed out.", "info")
        return redirect(url_for("login"))
