"""
REST API endpoints for the animals collection.

The routes follow the contract of the hosted mock API used as the
default load-test target: the collection returns a bare JSON array,
ids are strings, and unknown ids answer ``404`` with ``"Not found"``.

Endpoints:
    GET    /api/health          - Health check
    GET    /api/animals         - List all animals
    GET    /api/animals/<id>    - Get a single animal by ID
    POST   /api/animals         - Create a new animal
    PUT    /api/animals/<id>    - Update an existing animal
    DELETE /api/animals/<id>    - Delete an animal
"""

import logging
import os
from datetime import datetime, timezone
from flask import Blueprint, jsonify, request, Response
from sqlalchemy import select

from app import db
from app.models import Animal

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

# Fields clients may write; anything else in the body (including "id")
# is ignored.
WRITABLE_FIELDS = ("name", "createdAt", "description")


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def validate_animal_data(data: dict, required_fields: list[str] | None = None) -> tuple[bool, str | None]:
    """
    Validate animal data from request.

    Args:
        data: Dictionary containing animal data.
        required_fields: List of fields that must be present.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if required_fields:
        for field in required_fields:
            value = data.get(field)
            if not value or (isinstance(value, str) and not value.strip()):
                return False, f"'{field}' is required"

    if "name" in data and data["name"]:
        if not isinstance(data["name"], str):
            return False, "'name' must be a string"
        if len(data["name"]) > 200:
            return False, "Name must be 200 characters or less"

    if "createdAt" in data and data["createdAt"]:
        try:
            parse_created_at(data["createdAt"])
        except (ValueError, AttributeError, TypeError):
            return False, "Invalid createdAt format. Use ISO format (YYYY-MM-DDTHH:MM:SS)"

    return True, None


def parse_created_at(date_string: str | None) -> datetime | None:
    """
    Parse a ``createdAt`` string to a timezone-aware UTC datetime.

    Args:
        date_string: ISO format date string or None.

    Returns:
        datetime object or None.
    """
    if not date_string:
        return None
    parsed = datetime.fromisoformat(date_string.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _get_animal_or_none(animal_id: str) -> Animal | None:
    """Look up an animal by its string id; non-numeric ids never match."""
    if not animal_id.isdigit():
        return None
    return db.session.get(Animal, int(animal_id))


def _not_found() -> tuple[Response, int]:
    return jsonify("Not found"), 404


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/animals", methods=["GET"])
def get_animals() -> tuple[Response, int]:
    """
    List all animals ordered by id.

    Returns:
        JSON array of animals and 200 status code.
    """
    logger.info("GET /api/animals - Fetching all animals")

    animals = db.session.scalars(select(Animal).order_by(Animal.id.asc())).all()
    logger.info(f"Found {len(animals)} animals")

    return jsonify([animal.to_dict() for animal in animals]), 200


@api_bp.route("/animals/<animal_id>", methods=["GET"])
def get_animal(animal_id: str) -> tuple[Response, int]:
    """
    Get a single animal by ID.

    Returns:
        JSON animal and 200, or ``"Not found"`` and 404.
    """
    logger.info(f"GET /api/animals/{animal_id} - Fetching animal")

    animal = _get_animal_or_none(animal_id)
    if not animal:
        logger.warning(f"Animal {animal_id} not found")
        return _not_found()

    return jsonify(animal.to_dict()), 200


@api_bp.route("/animals", methods=["POST"])
def create_animal() -> tuple[Response, int]:
    """
    Create a new animal.

    Request Body (JSON):
        name: Animal name (required)
        createdAt: Creation timestamp in ISO format (optional)
        description: Animal description (optional)

    Returns:
        JSON response with created animal and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /api/animals - Creating new animal")

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    is_valid, error = validate_animal_data(data, required_fields=["name"])
    if not is_valid:
        logger.warning(f"Validation failed: {error}")
        return jsonify({"error": error}), 400

    animal = Animal(
        name=data["name"],
        description=data.get("description"),
    )
    created_at = parse_created_at(data.get("createdAt"))
    if created_at is not None:
        animal.created_at = created_at

    db.session.add(animal)
    db.session.commit()

    logger.info(f"Created animal with ID: {animal.id}")
    return jsonify(animal.to_dict()), 201


@api_bp.route("/animals/<animal_id>", methods=["PUT"])
def update_animal(animal_id: str) -> tuple[Response, int]:
    """
    Update an existing animal.

    Only ``name``, ``createdAt`` and ``description`` are written; an
    ``id`` in the body is ignored.

    Returns:
        JSON response with updated animal and 200 status code,
        or error message and 404/400 if not found or validation fails.
    """
    logger.info(f"PUT /api/animals/{animal_id} - Updating animal")

    animal = _get_animal_or_none(animal_id)
    if not animal:
        logger.warning(f"Animal {animal_id} not found")
        return _not_found()

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    is_valid, error = validate_animal_data(data)
    if not is_valid:
        logger.warning(f"Validation failed: {error}")
        return jsonify({"error": error}), 400

    updates = {field: data[field] for field in WRITABLE_FIELDS if field in data}
    if "name" in updates:
        if not updates["name"]:
            return jsonify({"error": "'name' is required"}), 400
        animal.name = updates["name"]
    if "description" in updates:
        animal.description = updates["description"]
    if updates.get("createdAt"):
        animal.created_at = parse_created_at(updates["createdAt"])

    db.session.commit()

    logger.info(f"Updated animal {animal_id}")
    return jsonify(animal.to_dict()), 200


@api_bp.route("/animals/<animal_id>", methods=["DELETE"])
def delete_animal(animal_id: str) -> tuple[Response, int]:
    """
    Delete an animal.

    Returns:
        The deleted animal and 200 status code,
        or ``"Not found"`` and 404.
    """
    logger.info(f"DELETE /api/animals/{animal_id} - Deleting animal")

    animal = _get_animal_or_none(animal_id)
    if not animal:
        logger.warning(f"Animal {animal_id} not found")
        return _not_found()

    payload = animal.to_dict()
    db.session.delete(animal)
    db.session.commit()

    logger.info(f"Deleted animal {animal_id}")
    return jsonify(payload), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error(f"Internal server error: {error}")
    return jsonify({"error": "Internal server error"}), 500
