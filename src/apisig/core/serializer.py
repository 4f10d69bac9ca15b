"""Method model serialization and deserialization.

This module renders a finished batch as JSON for downstream code generators
and reads such JSON back into method models.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from apisig.core.errors import ApiSignatureError
from apisig.core.models import MethodModel

_BATCH_ADAPTER = TypeAdapter(list[MethodModel])


class SerializationError(ApiSignatureError):
    """Error during serialization or deserialization."""


def serialize(models: list[MethodModel]) -> str:
    """Serialize a batch of method models to a JSON string.

    Args:
        models: The batch to serialize.

    Returns:
        JSON string representation of the batch.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        data = serialize_to_dict(models)
        return json.dumps(data, indent=2, ensure_ascii=False)
    except Exception as e:
        raise SerializationError(
            message="Failed to serialize method models",
            details=str(e),
        ) from e


def serialize_to_dict(models: list[MethodModel]) -> list[dict[str, Any]]:
    """Serialize a batch of method models to plain JSON-compatible data."""
    return _BATCH_ADAPTER.dump_python(models, mode="json")


def deserialize(json_str: str) -> list[MethodModel]:
    """Deserialize a JSON string to a batch of method models.

    Args:
        json_str: JSON string representation of a batch.

    Returns:
        The deserialized method models, in document order.

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
    return deserialize_from_list(data)


def deserialize_from_list(data: list[dict[str, Any]]) -> list[MethodModel]:
    """Deserialize plain data to a batch of method models.

    Raises:
        SerializationError: If the data does not describe method models.
    """
    try:
        return _BATCH_ADAPTER.validate_python(data)
    except ValidationError as e:
        error_details = []
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            error_details.append(f"{loc}: {err['msg']}")
        raise SerializationError(
            message="Method model validation failed",
            details="; ".join(error_details),
        ) from e
