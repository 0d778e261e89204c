"""Tests for the blog content service."""

import pytest

from inkpost_core.blog import service
from inkpost_core.blog.schemas import BlogCreate
from inkpost_core.exceptions import MissingRequiredField, StorageError
from inkpost_core.utils import isodatetime


def _post(**overrides) -> BlogCreate:
    data = {"title": "First post", "description": "Body text", "author_name": "Ann"}
    data.update(overrides)
    return BlogCreate(**data)


class TestCreatePost:
    """Tests for create_post."""

    def test_create_returns_stored_record(self, core):
        blog = service.create_post(core, _post())

        assert blog.id
        assert blog.title == "First post"
        assert blog.description == "Body text"
        assert blog.author_name == "Ann"
        assert blog.blog_image is None
        assert blog.publish_date is None
        assert blog.total_likes is None

    def test_create_assigns_created_at(self, core):
        blog = service.create_post(core, _post())

        created = isodatetime.to_datetime(blog.created_at)
        assert created.tzinfo is not None

    def test_optional_fields_pass_through(self, core):
        blog = service.create_post(core, _post(
            blog_image="https://example.com/cover.png",
            publish_date="2026-10-19",
            total_likes=42,
        ))

        assert blog.blog_image == "https://example.com/cover.png"
        assert blog.publish_date == "2026-10-19"
        assert blog.total_likes == 42

    @pytest.mark.parametrize("field", ["title", "description", "author_name"])
    def test_missing_required_field_raises(self, core, field):
        data = {"title": "First post", "description": "Body text", "author_name": "Ann"}
        del data[field]

        with pytest.raises(MissingRequiredField) as exc_info:
            service.create_post(core, BlogCreate(**data))

        assert exc_info.value.message == "Title, Content, and Author are required!"
        assert exc_info.value.details == {"missing": [field]}
        assert core.blog.list_all() == []

    def test_empty_required_field_raises(self, core):
        with pytest.raises(MissingRequiredField):
            service.create_post(core, _post(title=""))

        assert core.blog.list_all() == []

    def test_storage_failure_raises_storage_error(self, core, test_db):
        test_db.execute("DROP TABLE blogs")

        with pytest.raises(StorageError):
            service.create_post(core, _post())


class TestListPosts:
    """Tests for list_posts."""

    def test_empty_store_returns_empty_list(self, core):
        assert service.list_posts(core) == []

    def test_returns_every_post(self, core):
        for i in range(3):
            service.create_post(core, _post(title=f"Post {i}"))

        posts = service.list_posts(core)

        assert isinstance(posts, list)
        assert len(posts) == 3
        assert {p.title for p in posts} == {"Post 0", "Post 1", "Post 2"}
        assert all(p.created_at for p in posts)

    def test_list_is_a_snapshot(self, core):
        service.create_post(core, _post())
        posts = service.list_posts(core)

        service.create_post(core, _post(title="Later"))

        assert len(posts) == 1

    def test_storage_failure_raises_storage_error(self, core, test_db):
        test_db.execute("DROP TABLE blogs")

        with pytest.raises(StorageError):
            service.list_posts(core)
