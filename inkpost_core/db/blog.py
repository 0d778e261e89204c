"""Blog record operations.

IMPORT CONVENTION:
- Core accesses these through core.blog property

Blog records are write-once: there is no update or delete.
"""

import sqlite3

from . import storage_errors
from ..utils import isodatetime, uid

SQLITE_INT_MIN = -2**63
SQLITE_INT_MAX = 2**63 - 1


def _storable_number(value: int | float | None) -> int | float | None:
    """Ints beyond SQLite's 64-bit range are kept as floats."""
    if isinstance(value, int) and not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return float(value)
    return value


class BlogOperations:
    """Find/insert operations over the blogs table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(
        self,
        title: str,
        description: str,
        author_name: str,
        blog_image: str | None = None,
        publish_date: str | None = None,
        total_likes: int | float | None = None
    ) -> str:
        """Insert a blog record, stamping id and created_at.

        Returns:
            The new blog ID

        Raises:
            StorageError: On any database failure
        """
        blog_id = uid.generate_uuid()

        with storage_errors("insert blog"):
            self._conn.execute(
                """INSERT INTO blogs
                   (id, title, description, blog_image, author_name, publish_date, total_likes, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    blog_id,
                    title,
                    description,
                    blog_image,
                    author_name,
                    publish_date,
                    _storable_number(total_likes),
                    isodatetime.now(),
                )
            )

        return blog_id

    def get_by_id(self, blog_id: str) -> sqlite3.Row | None:
        with storage_errors("find blog"):
            return self._conn.execute(
                "SELECT * FROM blogs WHERE id = ?",
                (blog_id,)
            ).fetchone()

    def list_all(self) -> list[sqlite3.Row]:
        """Every blog record, unfiltered and unpaginated, fetched eagerly."""
        with storage_errors("list blogs"):
            return self._conn.execute("SELECT * FROM blogs").fetchall()
