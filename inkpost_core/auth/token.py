"""JWT access token service.

Tokens are HS256-signed with settings.jwt_secret and carry:
- email: the user's login email
- role: the user's role label
- iat: issued-at (Unix seconds)
- exp: expiry (Unix seconds), iat + settings.expires_in

Tokens are stateless; nothing is stored server-side and there is no
revocation.
"""

from datetime import timedelta

import jwt

from ..config import settings
from ..utils import isodatetime
from .schemas import TokenPayload, UserResponse


def token_lifetime() -> timedelta:
    """Configured access token lifetime."""
    return isodatetime.parse_duration(settings.expires_in)


def generate_access_token(user: UserResponse, expires_delta: timedelta | None = None) -> str:
    """
    Generate a signed access token for a user.

    Args:
        user: Authenticated user
        expires_delta: Override for the configured lifetime

    Returns:
        Encoded JWT string
    """
    if expires_delta is None:
        expires_delta = token_lifetime()

    issued_at = isodatetime.now_unix()
    payload = {
        "email": user.email,
        "role": str(user.role),
        "iat": issued_at,
        "exp": issued_at + int(expires_delta.total_seconds()),
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def validate_access_token(token: str) -> TokenPayload:
    """
    Verify signature and expiry, then return the claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed or the signature is wrong
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["exp", "iat"]},
    )
    return TokenPayload(**payload)


def decode_token_no_validation(token: str) -> dict:
    """Decode claims without checking signature or expiry. Debugging only."""
    return jwt.decode(token, options={"verify_signature": False})
