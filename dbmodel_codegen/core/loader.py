"""
Schema loading from raw configuration text.

Parses ``dbconfig.json`` text into the Schema model. Field names are matched
case-insensitively; unknown fields are ignored. Missing or empty input and
documents without entities yield None rather than an error.
"""

import json
from typing import Any, Dict, List, Optional

from ..logging_config import get_logger
from .schema import Entity, Property, Schema, SchemaParseError

logger = get_logger(__name__)


def load_schema(text: Optional[str]) -> Optional[Schema]:
    """
    Deserialize configuration text into a Schema.

    Args:
        text: Raw configuration text, or None when no configuration exists

    Returns:
        Populated Schema, or None when there is nothing to generate

    Raises:
        SchemaParseError: If the text is present but not a valid document
    """
    if text is None or not text.strip():
        logger.debug("No schema configuration supplied")
        return None

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e

    if document is None:
        logger.debug("Schema document is null")
        return None

    root = _as_object(document, "document")
    raw_entities = _lookup(root, "entities")

    if raw_entities is None:
        logger.debug("Schema document has no 'entities' field")
        return None

    if not isinstance(raw_entities, list):
        raise SchemaParseError(
            f"'entities' must be a list, got {_json_type(raw_entities)}"
        )

    if not raw_entities:
        logger.debug("Schema document has an empty 'entities' list")
        return None

    entities = [
        _parse_entity(raw, f"entities[{index}]")
        for index, raw in enumerate(raw_entities)
    ]

    logger.info("Loaded schema with %d entities", len(entities))
    return Schema(entities=entities)


def _parse_entity(raw: Any, path: str) -> Entity:
    """Convert one entity object."""
    node = _as_object(raw, path)

    raw_properties = _lookup(node, "properties")
    if raw_properties is None:
        raw_properties = []
    elif not isinstance(raw_properties, list):
        raise SchemaParseError(
            f"{path}.properties must be a list, got {_json_type(raw_properties)}"
        )

    return Entity(
        name=_required_string(node, "name", path),
        table_name=_required_string(node, "tableName", path),
        properties=[
            _parse_property(item, f"{path}.properties[{index}]")
            for index, item in enumerate(raw_properties)
        ],
    )


def _parse_property(raw: Any, path: str) -> Property:
    """Convert one property object."""
    node = _as_object(raw, path)

    return Property(
        name=_required_string(node, "name", path),
        type=_required_string(node, "type", path),
        is_primary_key=_optional_bool(node, "isPrimaryKey", path),
        is_required=_optional_bool(node, "isRequired", path),
        max_length=_optional_int(node, "maxLength", path, minimum=1),
        precision=_optional_int(node, "precision", path, minimum=0),
        scale=_optional_int(node, "scale", path, minimum=0),
    )


# Field access helpers


def _as_object(value: Any, path: str) -> Dict[str, Any]:
    """Return a JSON object keyed by lower-cased field names."""
    if not isinstance(value, dict):
        raise SchemaParseError(f"{path} must be an object, got {_json_type(value)}")

    # Later spellings of the same field win
    return {str(key).lower(): item for key, item in value.items()}


def _lookup(node: Dict[str, Any], key: str) -> Any:
    return node.get(key.lower())


def _required_string(node: Dict[str, Any], key: str, path: str) -> str:
    value = _lookup(node, key)
    if value is None:
        raise SchemaParseError(f"{path}.{key} is required")
    if not isinstance(value, str):
        raise SchemaParseError(
            f"{path}.{key} must be a string, got {_json_type(value)}"
        )
    return value


def _optional_bool(node: Dict[str, Any], key: str, path: str) -> bool:
    value = _lookup(node, key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise SchemaParseError(
            f"{path}.{key} must be a boolean, got {_json_type(value)}"
        )
    return value


def _optional_int(
    node: Dict[str, Any], key: str, path: str, minimum: int
) -> Optional[int]:
    value = _lookup(node, key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaParseError(
            f"{path}.{key} must be an integer, got {_json_type(value)}"
        )
    if value < minimum:
        raise SchemaParseError(f"{path}.{key} must be >= {minimum}, got {value}")
    return value


def _json_type(value: Any) -> str:
    """Name a Python value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def describe_entities(entities: List[Entity]) -> str:
    """One-line description of entities for log messages."""
    return ", ".join(f"{e.name}({len(e.properties)})" for e in entities)
