from __future__ import annotations

from urllib.parse import urlsplit

from flask import Blueprint, current_app, redirect, request, url_for
from flask_login import login_user, logout_user

from blogengine.extensions import limiter
from blogengine.forms.auth import LoginForm
from blogengine.repositories.user import get_user_by_username
from blogengine.utils.crypto import verify_password
from blogengine.views import view_factory

bp = Blueprint("auth", __name__, template_folder="../templates")


def _safe_next(target: str | None) -> str | None:
    # Only same-site relative paths
    if not target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not target.startswith("/"):
        return None
    return target


@bp.route("/login", methods=["GET", "POST"])
@limiter.limit("5 per minute; 20 per hour")
def login():
    form = LoginForm()
    # Flask-Login sends unauthenticated admin requests here with ?next=
    login_warning = "next" in request.args

    if form.validate_on_submit():
        user = get_user_by_username(form.username.data)
        if user and verify_password(form.password.data, user.password_hash):
            login_user(user, remember=False)
            current_app.logger.info(f"User {user.username} logged in")
            if user.reset_password_required:
                return redirect(url_for("admin.reset_password"))
            return redirect(_safe_next(request.args.get("next")) or url_for("admin.dashboard"))
        return view_factory().login_view(
            login_warning=login_warning,
            errors=["Your username or password was incorrect"],
            username=form.username.data,
            password=form.password.data,
        )

    if form.is_submitted():
        errors = [msg for messages in form.errors.values() for msg in messages]
        return view_factory().login_view(
            login_warning=login_warning,
            errors=errors,
            username=form.username.data or None,
            password=form.password.data or None,
        )

    return view_factory().login_view(login_warning=login_warning)


@bp.route("/logout")
def logout():
    logout_user()
    return redirect(url_for("blog.index"))
