"""Authentication module for Inkpost Core.

This module provides the credential flow:
- Schema validation for register/login bodies
- Password hashing and verification (bcrypt)
- JWT access token generation and validation
- Register and login endpoints

Auth endpoints (under /api/v1/):
- POST /register - Create user account
- POST /login - Authenticate and return JWT token

Tokens embed the user's role but no endpoint checks it.
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]
