from __future__ import annotations

# Import all models so metadata is complete for create_all and migrations
from blogengine.models.user import BlogUser
from blogengine.models.blog import Post, PostContext, SlugResult, Tag, post_tags

__all__ = [
    "BlogUser",
    "Post",
    "PostContext",
    "SlugResult",
    "Tag",
    "post_tags",
]
