"""Pydantic schemas for registration, login and tokens.

Request schemas only require that fields are present and are strings;
there are no format or strength rules on email or password.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Role(StrEnum):
    """Role labels stored on users and embedded in tokens (never enforced)."""

    USER = "user"
    ADMIN = "admin"


# ============================================================================
# User Schemas
# ============================================================================


class UserBase(BaseModel):
    """Fields shared by user requests and responses."""

    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email, unique across users")


class UserCreate(UserBase):
    """Body of POST /api/v1/register."""

    password: str = Field(..., description="Plaintext password, hashed before storage")


class UserLogin(BaseModel):
    """Body of POST /api/v1/login."""

    email: str
    password: str


class UserResponse(UserBase):
    """Public view of a user record. Never carries the password hash."""

    model_config = ConfigDict(use_enum_values=True)

    id: str
    role: Role = Role.USER
    created_at: str


# ============================================================================
# Token Schemas
# ============================================================================


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    email: str
    role: str
    iat: int
    exp: int


class RegisterResponse(BaseModel):
    success: bool = True
    message: str


class LoginResponse(BaseModel):
    """Successful login body; serialize with by_alias=True."""

    success: bool = True
    message: str
    access_token: str = Field(..., serialization_alias="accessToken")
