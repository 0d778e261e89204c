"""User record operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

Email is the natural key. The users.email column is UNIQUE, so two racing
registrations for the same address cannot both insert: the loser gets
DuplicateEmail from create().
"""

import sqlite3

from . import storage_errors
from ..exceptions import DuplicateEmail
from ..utils import isodatetime, uid


class UserOperations:
    """Find/insert operations over the users table."""

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def get_by_email(self, email: str) -> sqlite3.Row | None:
        """Get user row by exact email, or None if absent.

        The row includes password_hash; callers must not expose it.
        """
        with storage_errors("find user"):
            return self._conn.execute(
                "SELECT * FROM users WHERE email = ?",
                (email,)
            ).fetchone()

    def get_by_id(self, user_id: str) -> sqlite3.Row | None:
        """Get user row by ID, or None if absent."""
        with storage_errors("find user"):
            return self._conn.execute(
                "SELECT * FROM users WHERE id = ?",
                (user_id,)
            ).fetchone()

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        role: str = "user"
    ) -> str:
        """Insert a user record with auto-generated UUID.

        Args:
            username: Display name
            email: Unique login email
            password_hash: Bcrypt hash (never plaintext)
            role: Role label, "user" unless stated otherwise

        Returns:
            The new user ID

        Raises:
            DuplicateEmail: If a user with this email already exists
            StorageError: On any other database failure
        """
        user_id = uid.generate_uuid()

        with storage_errors("insert user"):
            try:
                self._conn.execute(
                    """INSERT INTO users (id, username, email, password_hash, role, created_at)
                       VALUES (?, ?, ?, ?, ?, ?)""",
                    (user_id, username, email, password_hash, role, isodatetime.now())
                )
            except sqlite3.IntegrityError as e:
                if "users.email" not in str(e):
                    raise
                raise DuplicateEmail(
                    "User already exist!!!",
                    {"email": email}
                ) from e

        return user_id
