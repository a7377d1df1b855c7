from __future__ import annotations

import time
from typing import Optional

import structlog
from flask_sqlalchemy.pagination import Pagination
from sqlalchemy.exc import IntegrityError

from blogengine.extensions import db
from blogengine.models.blog import Post, Tag, post_tags
from blogengine.models.user import BlogUser

log = structlog.get_logger(__name__)


# Tag repositories
def get_tag_by_name(name: str) -> Optional[Tag]:
    return db.session.execute(db.select(Tag).filter_by(name=name)).scalar_one_or_none()


def list_tags() -> list[Tag]:
    return list(db.session.execute(db.select(Tag).order_by(Tag.name)).scalars())


def get_or_create_tags(names: list[str]) -> list[Tag]:
    tags: list[Tag] = []
    for name in names:
        tag = get_tag_by_name(name)
        if tag is None:
            tag = Tag(name=name)
            db.session.add(tag)
        tags.append(tag)
    return tags


# Post repositories
def get_post_by_slug(slug: str) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(slug_url=slug)).scalar_one_or_none()


def get_post_by_id(post_id: int) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(id=post_id)).scalar_one_or_none()


def list_posts(*, published: bool) -> list[Post]:
    stmt = db.select(Post).filter_by(published=published).order_by(Post.created.desc())
    return list(db.session.execute(stmt).scalars())


def paginate_published_posts(page: int = 1, per_page: int = 10) -> Pagination:
    stmt = db.select(Post).filter_by(published=True).order_by(Post.created.desc())
    return db.paginate(stmt, page=page, per_page=per_page, error_out=False)


def paginate_posts_by_tag(tag: Tag, page: int = 1, per_page: int = 10) -> Pagination:
    stmt = (
        db.select(Post)
        .join(post_tags, post_tags.c.post_id == Post.id)
        .where(post_tags.c.tag_id == tag.id, Post.published.is_(True))
        .order_by(Post.created.desc())
    )
    return db.paginate(stmt, page=page, per_page=per_page, error_out=False)


def paginate_posts_by_author(
    author: BlogUser,
    page: int = 1,
    per_page: int = 10,
    *,
    include_drafts: bool = False,
) -> Pagination:
    stmt = db.select(Post).filter_by(author_id=author.id)
    if not include_drafts:
        stmt = stmt.filter_by(published=True)
    stmt = stmt.order_by(Post.created.desc())
    return db.paginate(stmt, page=page, per_page=per_page, error_out=False)


def _commit_post(p: Post) -> Post:
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("slug_conflict")
    return p


def _unique_slug(source: str, exclude_id: int | None = None) -> str:
    result = Post.generate_unique_slug(source, exclude_id=exclude_id)
    if not result.verified:
        # Left to the unique constraint on slug_url to reject a duplicate
        log.warning("post_slug_unverified", slug=result.slug)
    return result.slug


def create_post(
    *,
    title: str,
    contents: str,
    author: BlogUser,
    published: bool,
    tags: list[str] | None = None,
    slug_source: str | None = None,
) -> Post:
    p = Post(
        title=title,
        contents=contents,
        author=author,
        published=published,
        created=time.time(),
        slug_url=_unique_slug(slug_source or title),
    )
    p.tags = get_or_create_tags(tags or [])
    db.session.add(p)
    return _commit_post(p)


def update_post(
    p: Post,
    *,
    title: str,
    contents: str,
    published: bool,
    tags: list[str] | None = None,
    slug_source: str | None = None,
) -> Post:
    """Apply an edit. The slug only changes when a new slug source is given."""
    p.title = title
    p.contents = contents
    p.published = published
    p.tags = get_or_create_tags(tags or [])
    p.last_edited = time.time()
    if slug_source is not None:
        p.slug_url = _unique_slug(slug_source, exclude_id=p.id)
    return _commit_post(p)


def delete_post(p: Post) -> None:
    db.session.delete(p)
    db.session.commit()
