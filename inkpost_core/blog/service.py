"""Content service: create and list blog posts.

Functions take a db Core as their first argument; the caller owns the
transaction. Storage failures surface as StorageError and are not retried.
"""

import logging
import sqlite3

from ..db import Core
from ..exceptions import MissingRequiredField
from .schemas import BlogCreate, BlogResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "author_name")
MISSING_FIELDS_MESSAGE = "Title, Content, and Author are required!"


def _row_to_blog(row: sqlite3.Row) -> BlogResponse:
    return BlogResponse(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        blog_image=row["blog_image"],
        author_name=row["author_name"],
        publish_date=row["publish_date"],
        total_likes=row["total_likes"],
        created_at=row["created_at"],
    )


def create_post(core: Core, data: BlogCreate) -> BlogResponse:
    """
    Validate required fields, then insert one blog record.

    Returns:
        The stored record, including id and created_at

    Raises:
        MissingRequiredField: If title, description or author_name is absent
            or empty; nothing is written
        StorageError: If the insert fails
    """
    missing = [field for field in REQUIRED_FIELDS if not getattr(data, field)]
    if missing:
        raise MissingRequiredField(MISSING_FIELDS_MESSAGE, {"missing": missing})

    blog_id = core.blog.create(
        title=data.title,
        description=data.description,
        author_name=data.author_name,
        blog_image=data.blog_image,
        publish_date=data.publish_date,
        total_likes=data.total_likes,
    )
    blog = _row_to_blog(core.blog.get_by_id(blog_id))

    logger.info(f"Blog created: {blog.id} by {blog.author_name}")
    return blog


def list_posts(core: Core) -> list[BlogResponse]:
    """Return every stored post as a point-in-time list."""
    return [_row_to_blog(row) for row in core.blog.list_all()]
