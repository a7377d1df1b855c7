from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from datetime import datetime, timezone

import structlog
from sqlalchemy import Column, ForeignKey, Index, Table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogengine.extensions import db
from blogengine.utils.slug import slugify

log = structlog.get_logger(__name__)

SHORT_SNIPPET_LIMIT = 150
LONG_SNIPPET_LIMIT = 900


post_tags = Table(
    "blog_post_tags",
    db.metadata,
    Column("post_id", ForeignKey("blog_posts.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("blog_tags.id", ondelete="CASCADE"), primary_key=True),
)


class PostContext(str, enum.Enum):
    """Selects which derived fields a post projection carries."""

    PLAIN = "plain"
    SHORT_SNIPPET = "short_snippet"
    LONG_SNIPPET = "long_snippet"
    FULL = "full"


@dataclass(frozen=True)
class SlugResult:
    """Outcome of a unique slug lookup.

    ``error`` is set when the uniqueness check could not reach storage. The
    slug is then only the unchecked candidate and the write path has to cope
    with a possible unique constraint violation.
    """

    slug: str
    error: SQLAlchemyError | None = None

    @property
    def verified(self) -> bool:
        return self.error is None


class Tag(db.Model):
    __tablename__ = "blog_tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(100), unique=True, nullable=False, index=True)

    posts: Mapped[list["Post"]] = relationship(secondary=post_tags, back_populates="tags")

    @property
    def post_count(self) -> int:
        return sum(1 for p in self.posts if p.published)


class Post(db.Model):
    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(db.String(200), nullable=False)
    contents: Mapped[str] = mapped_column(db.Text, nullable=False)
    author_id: Mapped[int] = mapped_column(db.ForeignKey("blog_users.id", ondelete="CASCADE"), nullable=False)
    # Epoch seconds, UTC
    created: Mapped[float] = mapped_column(db.Float, nullable=False, default=time.time)
    last_edited: Mapped[float | None] = mapped_column(db.Float, nullable=True)
    slug_url: Mapped[str] = mapped_column(db.String(255), unique=True, nullable=False, index=True)
    published: Mapped[bool] = mapped_column(db.Boolean, default=False, nullable=False)

    author: Mapped["BlogUser"] = relationship(back_populates="posts")
    tags: Mapped[list[Tag]] = relationship(secondary=post_tags, back_populates="posts", order_by=Tag.name)

    __table_args__ = (
        Index("ix_blog_posts_published_created", "published", "created"),
    )

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.created, tz=timezone.utc)

    @property
    def last_edited_at(self) -> datetime | None:
        if self.last_edited is None:
            return None
        return datetime.fromtimestamp(self.last_edited, tz=timezone.utc)

    @property
    def tag_names(self) -> list[str]:
        return [t.name for t in self.tags]

    def short_snippet(self) -> str:
        return self._leading_lines(SHORT_SNIPPET_LIMIT)

    def long_snippet(self) -> str:
        return self._leading_lines(LONG_SNIPPET_LIMIT)

    def _leading_lines(self, limit: int) -> str:
        # Whole lines only; the line that crosses the limit is kept
        contents = (self.contents or "").replace("\r\n", "\n")
        snippet = ""
        for line in contents.split("\n"):
            snippet += f"{line}\n"
            if len(snippet) > limit:
                return snippet
        return snippet

    @classmethod
    def generate_unique_slug(cls, title: str, *, exclude_id: int | None = None) -> SlugResult:
        """
        Derive a slug from ``title`` that no stored post uses yet.

        Collisions are resolved by appending ``-2``, ``-3`` and so on to the
        base candidate. If storage cannot be queried the current candidate is
        returned unverified together with the error.

        ``exclude_id`` ignores one post, so an edited post does not collide
        with its own slug.
        """
        base = slugify(title)
        candidate = base
        count = 2
        try:
            while db.session.execute(
                db.select(cls.id).where(cls.slug_url == candidate, cls.id != exclude_id)
            ).first() is not None:
                candidate = f"{base}-{count}"
                count += 1
        except SQLAlchemyError as e:
            log.warning("slug_uniqueness_check_failed", slug=candidate, error=str(e))
            return SlugResult(slug=candidate, error=e)
        return SlugResult(slug=candidate)
