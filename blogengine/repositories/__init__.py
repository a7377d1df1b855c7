# Import all repository functions to maintain compatibility
from blogengine.repositories.user import (
    get_user_by_id,
    get_user_by_username,
    list_users,
    create_user,
    update_user,
    set_password,
)
from blogengine.repositories.blog import (
    get_tag_by_name,
    list_tags,
    get_post_by_id,
    get_post_by_slug,
    list_posts,
    paginate_published_posts,
    paginate_posts_by_tag,
    paginate_posts_by_author,
    create_post,
    update_post,
    delete_post,
)

__all__ = [
    # User repositories
    "get_user_by_id",
    "get_user_by_username",
    "list_users",
    "create_user",
    "update_user",
    "set_password",
    # Blog repositories
    "get_tag_by_name",
    "list_tags",
    "get_post_by_id",
    "get_post_by_slug",
    "list_posts",
    "paginate_published_posts",
    "paginate_posts_by_tag",
    "paginate_posts_by_author",
    "create_post",
    "update_post",
    "delete_post",
]
