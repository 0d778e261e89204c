"""Database module for Inkpost Core.

This module provides the Core API, the persistence gateway used by the
credential and content services. Core owns one SQLite connection and exposes
the find/insert operations for each record type:

    core.user.get_by_email(email)
    core.user.create(username=..., email=..., password_hash=...)
    core.blog.create(title=..., description=..., author_name=...)
    core.blog.list_all()

ARCHITECTURE:
- Core owns its connection (no Flask g.db dependency)
- Services receive a Core as their first argument and never open
  connections themselves, so tests can hand them a Core over :memory:
- Connection closes on context exit (atomic=True) or when Core is collected
- SQLite errors are re-raised as StorageError; callers never see sqlite3
  exceptions

Write path (commits on success, rolls back on error):

    with get_core(atomic=True) as core:
        user = service.register_user(core, data)
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from ..config import settings
from ..exceptions import StorageError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .blog import BlogOperations
    from .user import UserOperations


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise sqlite3.Error or OverflowError inside the block as StorageError.

    sqlite3 raises OverflowError for ints outside the 64-bit range.

    Args:
        operation: Short description used in the error message and log
    """
    try:
        yield
    except (sqlite3.Error, OverflowError) as e:
        logger.error(f"Storage failure during {operation}: {e}")
        raise StorageError(
            f"Storage failure during {operation}",
            {"operation": operation}
        ) from e


class Core:
    """
    Database Core with user and blog operations.

    Maintains its own connection and transaction state.

    Connection Lifecycle:
    - atomic=True: Connection closes on __exit__ from context manager
    - atomic=False: Caller commits if it writes; connection closes on
      garbage collection
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Core MUST be used as context manager.
        """
        self._conn = connection
        self._atomic = atomic
        self._user_ops = None
        self._blog_ops = None

    @property
    def user(self) -> "UserOperations":
        """User record operations (lazy-loaded, cached)."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    @property
    def blog(self) -> "BlogOperations":
        """Blog record operations (lazy-loaded, cached)."""
        if self._blog_ops is None:
            from .blog import BlogOperations
            self._blog_ops = BlogOperations(self._conn)
        return self._blog_ops

    def __enter__(self) -> "Core":
        """Enter context manager for atomic transaction.

        Raises:
            RuntimeError: If Core was not created with atomic=True
        """
        if not self._atomic:
            raise RuntimeError(
                "Core must be created with atomic=True for context manager use. "
                "Use: with db.get_core(atomic=True) as core:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Commit on clean exit, roll back otherwise, always close."""
        try:
            with storage_errors("commit"):
                if exc_type is None:
                    self._conn.commit()
                else:
                    self._conn.rollback()
        finally:
            self._conn.close()

    def __del__(self):
        """Close the connection if still open.

        Errors are ignored: the connection may already be closed.
        """
        if hasattr(self, "_conn") and self._conn:
            try:
                self._conn.close()
            except Exception:
                pass


def _database_path() -> Path:
    """Resolve settings.database_url to a filesystem path.

    Accepts a plain path or a sqlite:/// URL.
    """
    url = settings.database_url
    if url.startswith("sqlite:///"):
        url = url[len("sqlite:///"):]
    return Path(url)


def _create_connection() -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row

    Raises:
        StorageError: If the database cannot be opened
    """
    db_path = _database_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with storage_errors("connect"):
        conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def get_core(atomic: bool = False) -> Core:
    """
    Get a database Core instance.

    Args:
        atomic: If True, returns a Core that MUST be used as context manager
                and commits on exit. Use for writes.
                If False (default), returns a Core for reads.

    Examples:
        >>> posts = get_core().blog.list_all()

        >>> with get_core(atomic=True) as core:
        ...     core.blog.create(title="Hello", description="...", author_name="Ann")
    """
    return Core(_create_connection(), atomic=atomic)


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = _database_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    db = sqlite3.connect(str(db_path))
    try:
        cursor = db.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            # Database already initialized, skip
            return

        schema_path = Path(__file__).parent.parent / "schema" / "schema.sql"
        db.executescript(schema_path.read_text())
        db.commit()
    finally:
        db.close()
