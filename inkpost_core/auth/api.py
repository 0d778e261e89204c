"""Authentication API endpoints for Inkpost Core.

- POST /api/v1/register - Create a user account
- POST /api/v1/login    - Authenticate and return a JWT access token

Both endpoints are public. Failures are raised as exceptions and rendered
by the error handlers in main.py.
"""

import logging

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..db import get_core
from . import service
from .schemas import LoginResponse, RegisterResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
@validate_request
def register(data: UserCreate):
    """
    Register a new user.

    Raises:
        DuplicateEmail: If the email is already registered (400)
        ValidationError: If a field is missing (400)

    Example request:
    ```json
    {
        "username": "ann",
        "email": "ann@example.com",
        "password": "correct horse"
    }
    ```

    Example response (201):
    ```json
    {
        "success": true,
        "message": "User registered successfully!"
    }
    ```
    """
    with get_core(atomic=True) as core:
        service.register_user(core, data)

    return jsonify(
        RegisterResponse(message="User registered successfully!").model_dump()
    ), 201


@auth_bp.route("/login", methods=["POST"])
@validate_request
def login(data: UserLogin):
    """
    Authenticate user and return JWT token.

    Raises:
        InvalidCredentials: If the email is unknown or the password is wrong (401)

    Example response (200):
    ```json
    {
        "success": true,
        "message": "User successfully logged in!",
        "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
    }
    ```
    """
    core = get_core()
    access_token = service.login(core, data)

    return jsonify(
        LoginResponse(
            message="User successfully logged in!",
            access_token=access_token
        ).model_dump(by_alias=True)
    ), 200
