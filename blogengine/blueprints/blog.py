from __future__ import annotations

from flask import Blueprint, abort, current_app, redirect, request, url_for
from flask_login import current_user

from blogengine.extensions import limiter
from blogengine.repositories.blog import (
    get_post_by_slug,
    get_tag_by_name,
    list_tags,
    paginate_posts_by_author,
    paginate_posts_by_tag,
    paginate_published_posts,
)
from blogengine.repositories.user import get_user_by_username, list_users
from blogengine.views import page_context_from_request, view_factory

bp = Blueprint("blog", __name__, template_folder="../templates")


def _page() -> int:
    return max(1, request.args.get("page", 1, type=int))


def _per_page() -> int:
    return current_app.config.get("BLOG_POSTS_PER_PAGE", 10)


@bp.get("/")
@limiter.limit("120 per minute")
def index():
    """Blog index with the newest published posts first"""
    posts = paginate_published_posts(page=_page(), per_page=_per_page())
    return view_factory().blog_index_view(
        page_context_from_request(),
        paginated_posts=posts,
        tags=list_tags(),
        authors=list_users(),
    )


@bp.get("/posts/")
def posts_index():
    return redirect(url_for("blog.index"), code=301)


@bp.get("/posts/<slug>")
@limiter.limit("120 per minute")
def post(slug: str):
    p = get_post_by_slug(slug)
    # Drafts are only visible to signed-in authors
    if not p or (not p.published and not current_user.is_authenticated):
        abort(404)
    return view_factory().blog_post_view(page_context_from_request(), post=p, author=p.author)


@bp.get("/tags/")
@limiter.limit("120 per minute")
def all_tags():
    return view_factory().all_tags_view(page_context_from_request(), all_tags=list_tags())


@bp.get("/tags/<name>")
@limiter.limit("120 per minute")
def tag(name: str):
    t = get_tag_by_name(name)
    if not t:
        abort(404)
    posts = paginate_posts_by_tag(t, page=_page(), per_page=_per_page())
    return view_factory().tag_view(page_context_from_request(), tag=t, paginated_posts=posts)


@bp.get("/authors/")
@limiter.limit("120 per minute")
def all_authors():
    return view_factory().all_authors_view(page_context_from_request(), all_authors=list_users())


@bp.get("/authors/<username>")
@limiter.limit("120 per minute")
def author(username: str):
    a = get_user_by_username(username)
    if not a:
        abort(404)
    is_my_profile = current_user.is_authenticated and current_user.id == a.id
    posts = paginate_posts_by_author(a, page=_page(), per_page=_per_page(), include_drafts=is_my_profile)
    return view_factory().profile_view(
        page_context_from_request(),
        author=a,
        is_my_profile=is_my_profile,
        paginated_posts=posts,
    )
