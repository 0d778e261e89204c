"""Flask application entry point."""

import logging
from flask import Flask, jsonify
from flask_cors import CORS

from .config import settings
from .db import init_db
from .exceptions import (
    DuplicateEmail,
    InkpostError,
    InvalidCredentials,
    StorageError,
    ValidationError,
)
from .utils import isodatetime

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins, supports_credentials=True)


# Database initialization (runs once on app startup)
def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


# Initialize database with app context
with app.app_context():
    initialize_database()


# Error handlers
@app.errorhandler(ValidationError)
def handle_validation_error(error):
    """Handle ValidationError (and MissingRequiredField) exceptions."""
    response = {"message": error.message}
    if error.details:
        response["details"] = error.details
    return jsonify(response), 400


@app.errorhandler(DuplicateEmail)
def handle_duplicate_email(error):
    """Handle DuplicateEmail exceptions."""
    return jsonify({"success": False, "message": error.message}), 400


@app.errorhandler(InvalidCredentials)
def handle_invalid_credentials(error):
    """Handle InvalidCredentials exceptions.

    Same body for unknown email and wrong password; details are never sent.
    """
    return jsonify({"message": error.message}), 401


@app.errorhandler(StorageError)
def handle_storage_error(error):
    """Handle StorageError exceptions without exposing the cause."""
    logger.error(f"Storage error: {error.message} {error.details}")
    return jsonify({"message": SERVER_ERROR_MESSAGE}), 500


@app.errorhandler(InkpostError)
def handle_inkpost_error(error):
    """Handle any other InkpostError."""
    logger.error(f"{error.__class__.__name__}: {error.message}")
    return jsonify({"message": SERVER_ERROR_MESSAGE}), 500


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({"message": SERVER_ERROR_MESSAGE}), 500


# Liveness probe
@app.route("/")
def index():
    """Report that the server is up."""
    return jsonify({
        "message": "Server is running smoothly",
        "timestamp": isodatetime.now(),
    })


# Register API blueprints
from .api.v1 import api_v1_bp

app.register_blueprint(api_v1_bp)


def run():
    """Serve with the threaded development server on settings.port."""
    logger.info(f"Server is running on http://localhost:{settings.port}")
    app.run(host="0.0.0.0", port=settings.port, threaded=True)


if __name__ == "__main__":
    run()
