"""Credential service: password hashing, registration and login.

All functions take a db Core as their first argument. Nothing here opens a
connection or commits; the caller owns the transaction.
"""

import logging
import sqlite3

import bcrypt

from ..config import settings
from ..db import Core
from ..exceptions import DuplicateEmail, InvalidCredentials
from . import token
from .schemas import Role, UserCreate, UserLogin, UserResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
BCRYPT_MAX_PASSWORD_BYTES = 72


# ============================================================================
# Password Hashing
# ============================================================================


def _password_bytes(password: str) -> bytes:
    """UTF-8 encode and cut to the bytes bcrypt actually hashes."""
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt at the configured work factor.

    Only the first 72 bytes of the UTF-8 encoding take part in the hash.
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash using bcrypt.checkpw."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False


# ============================================================================
# User Lookups
# ============================================================================


def _row_to_user(row: sqlite3.Row) -> UserResponse:
    return UserResponse(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        role=row["role"],
        created_at=row["created_at"],
    )


def get_user_by_email(core: Core, email: str) -> UserResponse | None:
    row = core.user.get_by_email(email)
    return _row_to_user(row) if row else None


def get_user_with_password(core: Core, email: str) -> tuple[UserResponse, str] | None:
    """Return (user, password_hash) for login checks, or None."""
    row = core.user.get_by_email(email)
    if row is None:
        return None
    return _row_to_user(row), row["password_hash"]


# ============================================================================
# Registration
# ============================================================================


def create_user(core: Core, data: UserCreate, role: Role = Role.USER) -> UserResponse:
    """
    Hash the password and insert a user record.

    Raises:
        DuplicateEmail: If the email is taken (enforced by the store)
    """
    user_id = core.user.create(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=str(role),
    )
    return _row_to_user(core.user.get_by_id(user_id))


def register_user(core: Core, data: UserCreate) -> UserResponse:
    """
    Register a new user with the default role.

    Raises:
        DuplicateEmail: If a user with this email already exists
    """
    if get_user_by_email(core, data.email) is not None:
        logger.warning(f"Registration rejected, email already registered: {data.email}")
        raise DuplicateEmail("User already exist!!!", {"email": data.email})

    user = create_user(core, data)
    logger.info(f"User registered: {user.email}")
    return user


# ============================================================================
# Login
# ============================================================================


def verify_credentials(core: Core, email: str, password: str) -> UserResponse | None:
    """Return the user if email and password match, else None.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    result = get_user_with_password(core, email)
    if result is None:
        return None

    user, password_hash = result
    if not verify_password(password, password_hash):
        return None

    return user


def login(core: Core, data: UserLogin) -> str:
    """
    Authenticate and mint an access token.

    Returns:
        Signed JWT carrying email and role

    Raises:
        InvalidCredentials: If the email is unknown or the password is wrong
    """
    user = verify_credentials(core, data.email, data.password)
    if user is None:
        logger.warning(f"Failed login attempt for email: {data.email}")
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

    logger.info(f"Successful login: {user.email}")
    return token.generate_access_token(user)
