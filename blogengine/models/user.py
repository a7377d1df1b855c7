from __future__ import annotations

from flask_login import UserMixin
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogengine.extensions import db


class BlogUser(db.Model, UserMixin):
    __tablename__ = "blog_users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(120), nullable=False)
    username: Mapped[str] = mapped_column(db.String(50), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(db.String(255), nullable=False)
    reset_password_required: Mapped[bool] = mapped_column(db.Boolean, default=False, nullable=False)

    # Optional profile fields shown on the author page
    profile_picture: Mapped[str | None] = mapped_column(db.String(500), nullable=True)
    twitter_handle: Mapped[str | None] = mapped_column(db.String(50), nullable=True)
    biography: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    tagline: Mapped[str | None] = mapped_column(db.String(200), nullable=True)

    posts: Mapped[list["Post"]] = relationship(back_populates="author", cascade="all, delete-orphan")

    def get_id(self) -> str:  # Flask-Login compatibility
        return str(self.id)

    @property
    def post_count(self) -> int:
        return sum(1 for p in self.posts if p.published)
