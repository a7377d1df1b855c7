from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from flask import current_app, request
from flask_login import current_user

from blogengine.models.user import BlogUser


@dataclass(frozen=True)
class PageContext:
    """Request-level values every public page is rendered with."""

    uri: str
    user: BlogUser | None = None
    disqus_name: str | None = None
    site_twitter_handle: str | None = None

    @property
    def site_uri(self) -> str:
        parts = urlsplit(self.uri)
        return f"{parts.scheme}://{parts.netloc}/"


def page_context_from_request() -> PageContext:
    """Build a PageContext from the active Flask request and app config."""
    user = current_user._get_current_object() if current_user.is_authenticated else None
    return PageContext(
        uri=request.url,
        user=user,
        disqus_name=current_app.config.get("BLOG_DISQUS_NAME"),
        site_twitter_handle=current_app.config.get("BLOG_SITE_TWITTER_HANDLE"),
    )
