"""Flask application entry point."""

import logging
from flask import Flask, jsonify
from flask_cors import CORS

from .config import settings
from .db import init_db
from .exceptions import (
    AuthenticationError,
    DuplicateEmail,
    Forbidden,
    ResourceNotFound,
    UserHubError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins, supports_credentials=True)


def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


with app.app_context():
    initialize_database()


# Error handlers

def _error_response(error: UserHubError, status: int):
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), status


@app.errorhandler(ResourceNotFound)
def handle_not_found(error):
    """Handle ResourceNotFound exceptions."""
    return _error_response(error, 404)


@app.errorhandler(ValidationError)
def handle_validation_error(error):
    """Handle ValidationError exceptions."""
    return _error_response(error, 400)


@app.errorhandler(AuthenticationError)
def handle_authentication_error(error):
    """Handle AuthenticationError, InvalidCredentials and AccountDisabled."""
    return _error_response(error, 401)


@app.errorhandler(Forbidden)
def handle_forbidden(error):
    """Handle Forbidden exceptions (ownership check failed)."""
    return _error_response(error, 403)


@app.errorhandler(DuplicateEmail)
def handle_duplicate_email(error):
    """Handle DuplicateEmail exceptions."""
    return _error_response(error, 409)


@app.errorhandler(UserHubError)
def handle_userhub_error(error):
    """Handle any other UserHubError."""
    return _error_response(error, 500)


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


# Register blueprints
from .api.auth import auth_bp
from .api.v1 import api_v1_bp

app.register_blueprint(auth_bp)
app.register_blueprint(api_v1_bp)


if __name__ == "__main__":
    app.run(debug=True)
