"""Blog endpoints for Inkpost Core API.

- POST /api/v1/blogs - Create blog post
- GET  /api/v1/blogs - List all blog posts

Storage failures raise StorageError, which main.py renders as a generic
500 without leaking the cause.
"""

from flask import Blueprint, jsonify

from ...blog import service
from ...blog.schemas import BlogCreate, BlogCreatedResponse
from ...db import get_core
from ..validation import validate_request


# Create Blueprint
blogs_bp = Blueprint("blogs", __name__, url_prefix="/blogs")


@blogs_bp.post("")
@validate_request
def create_blog(data: BlogCreate):
    """
    Create a new blog post.

    Request Body (BlogCreate):
        - title: str (required, non-empty)
        - description: str (required, non-empty)
        - author_name: str (required, non-empty)
        - blog_image: str | None
        - publish_date: str | None
        - total_likes: number | None

    Returns:
        201: {message, blog} with the stored record
        400: Missing required field
        500: Server error
    """
    with get_core(atomic=True) as core:
        blog = service.create_post(core, data)

    return jsonify(
        BlogCreatedResponse(message="Blog created successfully!", blog=blog).model_dump(by_alias=True)
    ), 201


@blogs_bp.get("")
def list_blogs():
    """
    List every blog post.

    Returns:
        200: Array of blog records (empty array when there are none)
        500: Server error
    """
    core = get_core()
    blogs = service.list_posts(core)

    return jsonify([blog.model_dump(by_alias=True) for blog in blogs]), 200
