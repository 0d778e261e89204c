"""Pydantic schemas for blog posts."""

from pydantic import BaseModel, Field


class BlogCreate(BaseModel):
    """
    Body of POST /api/v1/blogs.

    title, description and author_name are required, but the check lives in
    blog.service.create_post so that absent and empty values get the same
    error. Here they are only typed.
    """

    title: str | None = None
    description: str | None = None
    author_name: str | None = None
    blog_image: str | None = None
    publish_date: str | None = None
    total_likes: int | float | None = None


class BlogResponse(BaseModel):
    """Stored blog record; serialize with by_alias=True for the wire names."""

    id: str = Field(..., serialization_alias="_id")
    title: str
    description: str
    blog_image: str | None = None
    author_name: str
    publish_date: str | None = None
    total_likes: int | float | None = None
    created_at: str = Field(..., serialization_alias="createdAt")


class BlogCreatedResponse(BaseModel):
    message: str
    blog: BlogResponse
