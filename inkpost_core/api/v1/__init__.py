"""API v1 endpoints for Inkpost Core.

This module provides the ApiV1 blueprint that aggregates all v1 resources:
- Auth (register, login)
- Blogs

The ApiV1 blueprint is registered in main.py under settings.api_v1_prefix.
No v1 endpoint requires authentication.
"""

from flask import Blueprint

from ...auth.api import auth_bp
from ...config import settings
from . import blogs

# Create the ApiV1 blueprint
api_v1_bp = Blueprint("api_v1", __name__, url_prefix=settings.api_v1_prefix)

# Full paths: /api/v1/register, /api/v1/login
api_v1_bp.register_blueprint(auth_bp)
# blogs_bp has url_prefix="/blogs", so full path is /api/v1/blogs
api_v1_bp.register_blueprint(blogs.blogs_bp)

__all__ = ["api_v1_bp"]
