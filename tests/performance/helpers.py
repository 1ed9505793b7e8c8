"""
Helper utilities for the Animals load-test scenario.

Provides the building blocks that the Locust user class and the
iteration workflow rely on: the ``Animal`` fixture record, fixture
loading, randomised payload selection, and request naming.

Key Concepts Demonstrated:
- Static fixture data sampled with replacement so payloads vary
  without generating anything at runtime
- Safe JSON decoding that never lets a malformed body abort a
  virtual user
- Request names that double as method/endpoint tags in Locust stats
"""

from __future__ import annotations

import json
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

# GET-by-id samples from this fixed range regardless of which animals
# currently exist on the server.
BY_ID_RANGE = (1, 50)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Animal:
    """
    One animal record as exchanged with the API.

    Attributes:
        name: Display name.
        createdAt: ISO-8601 creation timestamp, kept as a string.
        description: Free-text description.
        id: Server identifier; fixture records usually leave it unset.
    """

    name: str
    createdAt: str
    description: str
    id: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Animal:
        """
        Build an ``Animal`` from decoded JSON.

        Raises:
            ValueError: If *data* is not an object or a required string
                field is missing.
        """
        if not isinstance(data, dict):
            raise ValueError("Animal record must be a JSON object")

        values: dict[str, str] = {}
        for field_name in ("name", "createdAt", "description"):
            value = data.get(field_name)
            if not isinstance(value, str):
                raise ValueError(f"Animal record is missing string field '{field_name}'")
            values[field_name] = value

        raw_id = data.get("id")
        animal_id = str(raw_id) if raw_id not in (None, "") else None
        return cls(id=animal_id, **values)

    def to_payload(self) -> dict[str, str]:
        """Return the JSON body for this record; ``id`` only when set."""
        payload = {
            "name": self.name,
            "createdAt": self.createdAt,
            "description": self.description,
        }
        if self.id is not None:
            payload = {"id": self.id, **payload}
        return payload


def load_animals(path: Path) -> tuple[Animal, ...]:
    """
    Load the animal fixture set from a JSON array file.

    Args:
        path: Path to a file containing a JSON array of animal records.

    Returns:
        The parsed records, in file order.

    Raises:
        ValueError: If the file is not valid JSON, is not a non-empty
            array, or contains an invalid record.
    """
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Fixture file {path} is not valid JSON") from exc

    if not isinstance(data, list) or not data:
        raise ValueError(f"Fixture file {path} must contain a non-empty JSON array")

    try:
        return tuple(Animal.from_dict(item) for item in data)
    except ValueError as exc:
        raise ValueError(f"Invalid record in fixture file {path}: {exc}") from exc


def random_animal(animals: Sequence[Animal], rng: random.Random | None = None) -> Animal:
    """Pick one fixture animal uniformly at random (with replacement)."""
    return (rng or random).choice(animals)


def random_animal_id(rng: random.Random | None = None) -> str:
    """Draw a GET-by-id target uniformly from :data:`BY_ID_RANGE`."""
    low, high = BY_ID_RANGE
    return str((rng or random).randint(low, high))


def request_name(method: str, endpoint: str) -> str:
    """
    Build the Locust request name that tags a call with method/endpoint.

    Locust aggregates statistics per name, so every call in a group
    shares one row regardless of the concrete id in its URL.
    """
    return f"method={method} endpoint={endpoint}"


def safe_json(response: Any) -> Any:
    """
    Return the decoded response body, or ``None`` if it is not JSON.

    Locust responses may carry non-JSON bodies (error pages, empty
    bodies).  Returning ``None`` keeps decoding failures out of the
    iteration's control flow.
    """
    try:
        return response.json()
    except ValueError:
        return None


def created_id_from(body: Any) -> str | None:
    """Extract the identifier from a create response body, if it has one."""
    if not isinstance(body, dict):
        return None
    created_id = body.get("id")
    if created_id in (None, ""):
        return None
    return str(created_id)
