from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Dict

import click
from flask import Flask, g, jsonify, request
from markupsafe import Markup

from blogengine.config import Config
from blogengine.extensions import csrf, db, limiter, login_manager, migrate
from blogengine.logging_config import configure_logging
from blogengine.models.user import BlogUser  # ensure models imported for migrations
from blogengine.security import apply_security_headers
from blogengine.utils.markdown import render_markdown
from blogengine.views import ViewFactory


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    app.permanent_session_lifetime = timedelta(minutes=int(app.config.get("SESSION_LIFETIME_MINUTES", 60)))

    configure_logging()

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    limiter.init_app(app)

    # Hosts may swap the renderer by replacing this entry
    app.extensions["blogengine.views"] = ViewFactory()

    @login_manager.user_loader
    def load_user(user_id: str) -> BlogUser | None:
        return db.session.get(BlogUser, int(user_id))

    login_manager.login_view = "auth.login"

    @app.template_filter("markdown")
    def markdown_filter(text: str) -> Markup:
        """Render post markdown to sanitized HTML."""
        return Markup(render_markdown(text or ""))

    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()

    @app.after_request
    def set_headers(resp):
        return apply_security_headers(resp)

    # Blueprints
    from blogengine.blueprints.admin import bp as admin_bp
    from blogengine.blueprints.auth import bp as auth_bp
    from blogengine.blueprints.blog import bp as blog_bp

    app.register_blueprint(blog_bp)
    app.register_blueprint(auth_bp, url_prefix="/admin")
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": e.description}), 400

    @app.errorhandler(401)
    def unauthorized(e):
        return jsonify({"error": "unauthorized", "message": "authentication required"}), 401

    @app.errorhandler(403)
    def forbidden(e):
        return jsonify({"error": "forbidden", "message": e.description}), 403

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: create the first author
    @app.cli.command("create-admin")
    @click.option("--name", prompt=True)
    @click.option("--username", prompt=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(name: str, username: str, password: str) -> None:
        from blogengine.repositories.user import create_user, get_user_by_username

        if get_user_by_username(username):
            click.echo("User already exists")
            return
        create_user(name=name, username=username, password=password)
        click.echo("Admin user created")

    return app
