"""Assembly of template parameters for every blog page.

``ViewFactory`` turns already-fetched entities and a ``PageContext`` into the
parameter dict of one template and hands it to its renderer. It performs no
queries of its own.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol
from urllib.parse import quote

from flask import abort, render_template

from blogengine.models.blog import Post, Tag
from blogengine.models.user import BlogUser
from blogengine.schemas.views import (
    as_params,
    full_post_view,
    long_snippet_post_view,
    plain_post_view,
    tag_view as plain_tag_view,
    tag_with_post_count_view,
    user_view,
    user_with_post_count_view,
)
from blogengine.utils.html import first_image, text_content
from blogengine.utils.markdown import render_markdown
from blogengine.views.context import PageContext

Renderer = Callable[[str, dict[str, Any]], Any]

# Characters a URL query may carry unescaped
_QUERY_SAFE = "!$&'()*+,-./:;=?@_~"


class Paginated(Protocol):
    items: list[Post]
    page: int
    per_page: int
    total: int | None
    pages: int
    has_next: bool
    has_prev: bool


def render_template_renderer(template: str, params: dict[str, Any]) -> str:
    return render_template(f"{template}.html", **params)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def paginated_params(pagination: Paginated, project: Callable[[Post], Any]) -> dict[str, Any]:
    return {
        "data": [as_params(project(p)) for p in pagination.items],
        "meta": {
            "page": pagination.page,
            "per_page": pagination.per_page,
            "total": pagination.total or 0,
            "pages": pagination.pages,
            "has_next": pagination.has_next,
            "has_prev": pagination.has_prev,
        },
    }


def _by_post_count(items: Iterable[Any]) -> list[Any]:
    return sorted(items, key=lambda item: item.post_count, reverse=True)


class ViewFactory:
    def __init__(self, renderer: Renderer = render_template_renderer) -> None:
        self.renderer = renderer

    # Admin pages

    def create_post_view(
        self,
        uri: str,
        *,
        errors: list[str] | None = None,
        title: str | None = None,
        contents: str | None = None,
        slug_url: str | None = None,
        tags: list[str] | None = None,
        is_editing: bool = False,
        post_to_edit: Post | None = None,
        draft: bool = True,
    ) -> Any:
        title_error = _is_blank(title) and errors is not None
        contents_error = _is_blank(contents) and errors is not None

        if is_editing:
            marker = uri.find("admin/posts")
            if marker == -1:
                abort(500, description="edit uri does not contain admin/posts")
            post_path_prefix = uri[:marker] + "posts/"
        else:
            post_path_prefix = uri.replace("admin/posts/new", "posts/")

        params: dict[str, Any] = {
            "post_path_prefix": post_path_prefix,
            "title_error": title_error,
            "contents_error": contents_error,
        }
        if errors is not None:
            params["errors"] = errors
        if title is not None:
            params["title_supplied"] = title
        if contents is not None:
            params["contents_supplied"] = contents
        if slug_url is not None:
            params["slug_url_supplied"] = slug_url
        if tags:
            params["tags_supplied"] = tags
        if draft:
            params["draft"] = True

        if is_editing:
            if post_to_edit is None:
                abort(400, description="no post to edit")
            params["editing"] = True
            params["post"] = as_params(plain_post_view(post_to_edit))
        else:
            params["create_blog_post_page"] = True

        return self.renderer("blog/admin/createPost", params)

    def create_user_view(
        self,
        *,
        editing: bool = False,
        errors: list[str] | None = None,
        name: str | None = None,
        username: str | None = None,
        password_error: bool | None = None,
        confirm_password_error: bool | None = None,
        reset_password_required: bool | None = None,
        user_id: int | None = None,
        profile_picture: str | None = None,
        twitter_handle: str | None = None,
        biography: str | None = None,
        tagline: str | None = None,
    ) -> Any:
        params: dict[str, Any] = {
            "name_error": name is None and errors is not None,
            "username_error": username is None and errors is not None,
        }
        if errors is not None:
            params["errors"] = errors
        if name is not None:
            params["name_supplied"] = name
        if username is not None:
            params["username_supplied"] = username
        if password_error is not None:
            params["password_error"] = password_error
        if confirm_password_error is not None:
            params["confirm_password_error"] = confirm_password_error
        if reset_password_required:
            params["reset_password_on_login_supplied"] = True
        if profile_picture is not None:
            params["profile_picture_supplied"] = profile_picture
        if twitter_handle is not None:
            params["twitter_handle_supplied"] = twitter_handle
        if biography is not None:
            params["biography_supplied"] = biography
        if tagline is not None:
            params["tagline_supplied"] = tagline

        if editing:
            if user_id is None:
                abort(400, description="no user to edit")
            params["editing"] = True
            params["user_id"] = user_id

        return self.renderer("blog/admin/createUser", params)

    def login_view(
        self,
        *,
        login_warning: bool = False,
        errors: list[str] | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> Any:
        params: dict[str, Any] = {
            "username_error": username is None and errors is not None,
            "password_error": password is None and errors is not None,
        }
        if username is not None:
            params["username_supplied"] = username
        if errors is not None:
            params["errors"] = errors
        if login_warning:
            params["login_warning"] = True

        return self.renderer("blog/admin/login", params)

    def admin_view(
        self,
        *,
        published_posts: list[Post],
        draft_posts: list[Post],
        users: list[BlogUser],
        errors: list[str] | None = None,
    ) -> Any:
        params: dict[str, Any] = {
            "users": [as_params(user_view(u)) for u in users],
            "blog_admin_page": True,
        }
        if published_posts:
            params["published_posts"] = [as_params(full_post_view(p)) for p in published_posts]
        if draft_posts:
            params["draft_posts"] = [as_params(full_post_view(p)) for p in draft_posts]
        if errors is not None:
            params["errors"] = errors

        return self.renderer("blog/admin/index", params)

    def reset_password_view(
        self,
        *,
        errors: list[str] | None = None,
        password_error: bool | None = None,
        confirm_password_error: bool | None = None,
    ) -> Any:
        params: dict[str, Any] = {}
        if errors is not None:
            params["errors"] = errors
        if password_error is not None:
            params["password_error"] = password_error
        if confirm_password_error is not None:
            params["confirm_password_error"] = confirm_password_error

        return self.renderer("blog/admin/resetPassword", params)

    # Public pages

    def profile_view(
        self,
        context: PageContext,
        *,
        author: BlogUser,
        is_my_profile: bool,
        paginated_posts: Paginated,
    ) -> Any:
        params: dict[str, Any] = {"author": as_params(user_with_post_count_view(author))}
        if is_my_profile:
            params["my_profile"] = True
        else:
            params["profile_page"] = True
        if paginated_posts.pages > 0:
            params["posts"] = paginated_params(paginated_posts, long_snippet_post_view)

        return self._public_view("blog/profile", context, params)

    def blog_index_view(
        self,
        context: PageContext,
        *,
        paginated_posts: Paginated,
        tags: list[Tag],
        authors: list[BlogUser],
    ) -> Any:
        params: dict[str, Any] = {"blog_index_page": True}
        if paginated_posts.pages > 0:
            params["posts"] = paginated_params(paginated_posts, long_snippet_post_view)
        if tags:
            params["tags"] = [as_params(plain_tag_view(t)) for t in tags]
        if authors:
            params["authors"] = [as_params(user_view(a)) for a in authors]

        return self._public_view("blog/blog", context, params)

    def blog_post_view(self, context: PageContext, *, post: Post, author: BlogUser) -> Any:
        params: dict[str, Any] = {
            "post": as_params(full_post_view(post)),
            "author": as_params(user_view(author)),
            "blog_post_page": True,
            "post_uri": context.uri,
            "post_uri_encoded": quote(context.uri, safe=_QUERY_SAFE),
            "site_uri": context.site_uri,
            "post_description": text_content(render_markdown(post.short_snippet())),
        }

        image = first_image(render_markdown(post.contents))
        if image is not None:
            params["post_image"] = image.src
            if image.alt:
                params["post_image_alt"] = image.alt

        return self._public_view("blog/blogpost", context, params)

    def tag_view(self, context: PageContext, *, tag: Tag, paginated_posts: Paginated) -> Any:
        params: dict[str, Any] = {
            "tag": as_params(tag_with_post_count_view(tag)),
            "tag_page": True,
        }
        if paginated_posts.pages > 0:
            params["posts"] = paginated_params(paginated_posts, long_snippet_post_view)

        return self._public_view("blog/tag", context, params)

    def all_tags_view(self, context: PageContext, *, all_tags: list[Tag]) -> Any:
        params: dict[str, Any] = {}
        if all_tags:
            params["tags"] = [as_params(tag_with_post_count_view(t)) for t in _by_post_count(all_tags)]

        return self._public_view("blog/tags", context, params, with_comments=False)

    def all_authors_view(self, context: PageContext, *, all_authors: list[BlogUser]) -> Any:
        params: dict[str, Any] = {}
        if all_authors:
            params["authors"] = [
                as_params(user_with_post_count_view(a)) for a in _by_post_count(all_authors)
            ]

        return self._public_view("blog/authors", context, params, with_comments=False)

    def _public_view(
        self,
        template: str,
        context: PageContext,
        params: dict[str, Any],
        *,
        with_comments: bool = True,
    ) -> Any:
        view_params = dict(params)
        view_params["uri"] = context.uri
        if context.user is not None:
            view_params["user"] = as_params(user_view(context.user))
        if with_comments and context.disqus_name is not None:
            view_params["disqus_name"] = context.disqus_name
        if context.site_twitter_handle is not None:
            view_params["site_twitter_handle"] = context.site_twitter_handle

        return self.renderer(template, view_params)
