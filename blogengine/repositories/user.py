from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from blogengine.extensions import db
from blogengine.models.user import BlogUser
from blogengine.utils.crypto import hash_password


def get_user_by_id(user_id: int) -> Optional[BlogUser]:
    return db.session.get(BlogUser, user_id)


def get_user_by_username(username: str) -> Optional[BlogUser]:
    return db.session.execute(db.select(BlogUser).filter_by(username=username)).scalar_one_or_none()


def list_users() -> list[BlogUser]:
    return list(db.session.execute(db.select(BlogUser).order_by(BlogUser.name)).scalars())


def _commit_user(user: BlogUser) -> BlogUser:
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("username_conflict")
    return user


def create_user(
    *,
    name: str,
    username: str,
    password: str,
    reset_password_required: bool = False,
    profile_picture: str | None = None,
    twitter_handle: str | None = None,
    biography: str | None = None,
    tagline: str | None = None,
) -> BlogUser:
    user = BlogUser(
        name=name,
        username=username,
        password_hash=hash_password(password),
        reset_password_required=reset_password_required,
        profile_picture=profile_picture,
        twitter_handle=twitter_handle,
        biography=biography,
        tagline=tagline,
    )
    db.session.add(user)
    return _commit_user(user)


def update_user(
    user: BlogUser,
    *,
    name: str,
    username: str,
    password: str | None = None,
    reset_password_required: bool = False,
    profile_picture: str | None = None,
    twitter_handle: str | None = None,
    biography: str | None = None,
    tagline: str | None = None,
) -> BlogUser:
    """Apply an edit. The password is kept unless a new one is given."""
    user.name = name
    user.username = username
    user.reset_password_required = reset_password_required
    user.profile_picture = profile_picture
    user.twitter_handle = twitter_handle
    user.biography = biography
    user.tagline = tagline
    if password:
        user.password_hash = hash_password(password)
    return _commit_user(user)


def set_password(user: BlogUser, password: str) -> None:
    """Store a new password and clear the reset-on-login flag."""
    user.password_hash = hash_password(password)
    user.reset_password_required = False
    db.session.commit()
