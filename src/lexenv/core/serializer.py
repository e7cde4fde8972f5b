"""Snapshot serialization and deserialization.

This module converts EnvironmentSnapshot data to JSON and back. Parent links
are stored as scope IDs, so the nesting of the chain is flat in JSON.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from lexenv.core.models import EnvironmentSnapshot


class SerializationError(Exception):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


def _format_validation_error(e: ValidationError) -> str:
    error_details = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def serialize(snapshot: EnvironmentSnapshot) -> str:
    """Serialize a snapshot to a JSON string.

    Args:
        snapshot: The snapshot to serialize.

    Returns:
        JSON string representation of the snapshot.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        data = snapshot.model_dump(mode="json")
        return json.dumps(data, indent=2, ensure_ascii=False)
    except Exception as e:
        raise SerializationError(
            message="Failed to serialize snapshot",
            details=str(e),
        ) from e


def deserialize(json_str: str) -> EnvironmentSnapshot:
    """Deserialize a JSON string to a snapshot.

    Args:
        json_str: JSON string representation of a snapshot.

    Returns:
        The deserialized snapshot.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return deserialize_from_dict(data)


def serialize_to_dict(snapshot: EnvironmentSnapshot) -> dict[str, Any]:
    """Serialize a snapshot to a dictionary."""
    return snapshot.model_dump(mode="json")


def deserialize_from_dict(data: Any) -> EnvironmentSnapshot:
    """Deserialize a dictionary to a snapshot.

    Args:
        data: Dictionary representation of a snapshot.

    Returns:
        The deserialized snapshot.

    Raises:
        SerializationError: If deserialization fails.
    """
    try:
        return EnvironmentSnapshot.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Snapshot validation failed",
            details=_format_validation_error(e),
        ) from e
