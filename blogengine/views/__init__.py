from __future__ import annotations

from flask import current_app

from blogengine.views.context import PageContext, page_context_from_request
from blogengine.views.factory import ViewFactory, render_template_renderer

__all__ = [
    "PageContext",
    "ViewFactory",
    "page_context_from_request",
    "render_template_renderer",
    "view_factory",
]


def view_factory() -> ViewFactory:
    """The ViewFactory registered on the current app, or a default one."""
    return current_app.extensions.get("blogengine.views") or ViewFactory()
