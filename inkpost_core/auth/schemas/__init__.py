"""Authentication Pydantic schemas for API validation."""

from .auth import (
    Role,
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
    TokenPayload,
    RegisterResponse,
    LoginResponse,
)

__all__ = [
    "Role",
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "TokenPayload",
    "RegisterResponse",
    "LoginResponse",
]
