from __future__ import annotations

# Re-export common forms for convenience
from .auth import LoginForm, ResetPasswordForm  # noqa: F401
from .posts import DeletePostForm, PostForm  # noqa: F401
from .users import UserForm  # noqa: F401

__all__ = [
    # auth
    "LoginForm",
    "ResetPasswordForm",
    # posts
    "PostForm",
    "DeletePostForm",
    # users
    "UserForm",
]
