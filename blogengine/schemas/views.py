"""Template-facing projections of posts, authors and tags.

Each post context has its own model and projection function so templates get
a fixed set of keys per page type. ``as_params`` dumps a model to the plain
dict handed to the renderer, leaving out fields that are not set.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

from pydantic import BaseModel

from blogengine.models.blog import Post, PostContext, Tag
from blogengine.models.user import BlogUser


def full_date(dt: datetime) -> str:
    """Long-form UTC date, e.g. ``Monday, October 19, 2026``."""
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}"


def iso8601(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%S%z")


# Authors and tags

class UserView(BaseModel):
    id: int
    name: str
    username: str
    profile_picture: str | None = None
    twitter_handle: str | None = None
    biography: str | None = None
    tagline: str | None = None


class UserWithPostCountView(UserView):
    post_count: int


class TagView(BaseModel):
    id: int
    name: str


class TagWithPostCountView(TagView):
    post_count: int


def user_view(user: BlogUser) -> UserView:
    return UserView(
        id=user.id,
        name=user.name,
        username=user.username,
        profile_picture=user.profile_picture,
        twitter_handle=user.twitter_handle,
        biography=user.biography,
        tagline=user.tagline,
    )


def user_with_post_count_view(user: BlogUser) -> UserWithPostCountView:
    return UserWithPostCountView(**user_view(user).model_dump(), post_count=user.post_count)


def tag_view(tag: Tag) -> TagView:
    return TagView(id=tag.id, name=tag.name)


def tag_with_post_count_view(tag: Tag) -> TagWithPostCountView:
    return TagWithPostCountView(id=tag.id, name=tag.name, post_count=tag.post_count)


# Posts

class PlainPostView(BaseModel):
    id: int
    title: str
    contents: str
    bloguser_id: int
    created: float
    slug_url: str
    published: bool
    last_edited: float | None = None


class _AuthoredPostView(PlainPostView):
    author_name: str | None = None
    author_username: str | None = None
    created_date: str


class ShortSnippetPostView(_AuthoredPostView):
    short_snippet: str


class LongSnippetPostView(_AuthoredPostView):
    long_snippet: str
    tags: list[TagView] | None = None


class FullPostView(_AuthoredPostView):
    created_date_iso8601: str
    last_edited_date: str | None = None
    last_edited_date_iso8601: str | None = None
    short_snippet: str
    long_snippet: str
    tags: list[TagView] | None = None


def plain_post_view(post: Post) -> PlainPostView:
    return PlainPostView(
        id=post.id,
        title=post.title,
        contents=post.contents,
        bloguser_id=post.author_id,
        created=post.created,
        slug_url=post.slug_url,
        published=post.published,
        last_edited=post.last_edited,
    )


def _authored_fields(post: Post) -> dict[str, Any]:
    fields = plain_post_view(post).model_dump()
    author = post.author
    fields["author_name"] = author.name if author else None
    fields["author_username"] = author.username if author else None
    fields["created_date"] = full_date(post.created_at)
    return fields


def _tag_list(post: Post) -> list[TagView] | None:
    # Omitted entirely rather than sent as an empty list
    return [tag_view(t) for t in post.tags] or None


def short_snippet_post_view(post: Post) -> ShortSnippetPostView:
    return ShortSnippetPostView(**_authored_fields(post), short_snippet=post.short_snippet())


def long_snippet_post_view(post: Post) -> LongSnippetPostView:
    return LongSnippetPostView(
        **_authored_fields(post),
        long_snippet=post.long_snippet(),
        tags=_tag_list(post),
    )


def full_post_view(post: Post) -> FullPostView:
    edited = post.last_edited_at
    return FullPostView(
        **_authored_fields(post),
        created_date_iso8601=iso8601(post.created_at),
        last_edited_date=full_date(edited) if edited else None,
        last_edited_date_iso8601=iso8601(edited) if edited else None,
        short_snippet=post.short_snippet(),
        long_snippet=post.long_snippet(),
        tags=_tag_list(post),
    )


PROJECTIONS: dict[PostContext, Callable[[Post], PlainPostView]] = {
    PostContext.PLAIN: plain_post_view,
    PostContext.SHORT_SNIPPET: short_snippet_post_view,
    PostContext.LONG_SNIPPET: long_snippet_post_view,
    PostContext.FULL: full_post_view,
}


def project_post(post: Post, context: PostContext = PostContext.PLAIN) -> PlainPostView:
    return PROJECTIONS[context](post)


def as_params(view: BaseModel) -> dict[str, Any]:
    return view.model_dump(exclude_none=True)
