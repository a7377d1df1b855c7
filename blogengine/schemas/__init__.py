from __future__ import annotations

# Re-export common schema classes for convenient imports
from .posts import PostInput  # noqa: F401
from .users import UserInput  # noqa: F401
from .views import (  # noqa: F401
    FullPostView,
    LongSnippetPostView,
    PlainPostView,
    ShortSnippetPostView,
    TagView,
    TagWithPostCountView,
    UserView,
    UserWithPostCountView,
    as_params,
    project_post,
)

__all__ = [
    # inputs
    "PostInput",
    "UserInput",
    # views
    "FullPostView",
    "LongSnippetPostView",
    "PlainPostView",
    "ShortSnippetPostView",
    "TagView",
    "TagWithPostCountView",
    "UserView",
    "UserWithPostCountView",
    "as_params",
    "project_post",
]
