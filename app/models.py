"""
Database models for the local Animals API.

This module defines the SQLAlchemy model backing the animals
collection. Its JSON shape matches the hosted mock API the load test
targets: string ids and a camelCase ``createdAt`` field.
"""

from datetime import datetime, timezone
from typing import Any

from app import db


class Animal(db.Model):
    """
    Animal record exposed by the ``/api/animals`` endpoints.

    Attributes:
        id: Unique identifier, serialized as a string.
        name: Display name of the animal.
        created_at: Creation timestamp, client supplied or server default.
        description: Free-text description.
    """

    __tablename__ = "animals"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(200), nullable=False)
    description: str | None = db.Column(db.Text, nullable=True)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    @staticmethod
    def _to_utc_iso(value: datetime | None) -> str | None:
        """
        Convert datetime to an ISO-8601 UTC string.

        SQLite returns naive datetime values even when timezone-aware
        columns are declared, so they are assumed to be UTC.
        """
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        return value.isoformat().replace("+00:00", "Z")

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the animal to its API representation.

        Returns:
            Dictionary with ``id``, ``name``, ``createdAt`` and ``description``.
        """
        return {
            "id": str(self.id),
            "name": self.name,
            "createdAt": self._to_utc_iso(self.created_at),
            "description": self.description,
        }

    def __repr__(self) -> str:
        """Return string representation of the animal."""
        return f"<Animal {self.id}: {self.name}>"
