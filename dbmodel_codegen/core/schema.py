"""
Core schema representation for code generation.

Holds the entities, properties and semantic property types read from a
``dbconfig.json`` document. Generators only ever read these objects.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum


class SchemaError(Exception):
    """Base exception for schema-related errors."""

    pass


class SchemaParseError(SchemaError):
    """Raised when configuration text is present but not a valid schema document."""

    pass


class SchemaValidationError(SchemaError):
    """Raised when a parsed schema cannot produce valid generated code."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class DuplicateNameError(SchemaValidationError):
    """Raised when entity, table or property names collide."""

    pass


class UnrecognizedPropertyTypeError(SchemaError):
    """Raised when a property type is not part of the recognized type set."""

    def __init__(self, entity: str, property_name: str, type_name: str):
        self.entity = entity
        self.property = property_name
        self.type_name = type_name
        super().__init__(
            f"Unrecognized type '{type_name}' for property {entity}.{property_name}"
        )


class PropertyType(Enum):
    """Semantic scalar types a property may declare."""

    STRING = "string"
    INTEGER = "int"
    LONG = "long"
    SHORT = "short"
    BYTE = "byte"
    BOOLEAN = "bool"
    DECIMAL = "decimal"
    DOUBLE = "double"
    FLOAT = "float"
    DATETIME = "datetime"
    DATETIME_OFFSET = "datetimeoffset"
    TIMESPAN = "timespan"
    GUID = "guid"
    BINARY = "binary"


# Accepted spellings, matched case-insensitively
TYPE_ALIASES: Dict[str, PropertyType] = {
    "string": PropertyType.STRING,
    "str": PropertyType.STRING,
    "text": PropertyType.STRING,
    "int": PropertyType.INTEGER,
    "integer": PropertyType.INTEGER,
    "int32": PropertyType.INTEGER,
    "long": PropertyType.LONG,
    "int64": PropertyType.LONG,
    "bigint": PropertyType.LONG,
    "short": PropertyType.SHORT,
    "int16": PropertyType.SHORT,
    "smallint": PropertyType.SHORT,
    "byte": PropertyType.BYTE,
    "tinyint": PropertyType.BYTE,
    "bool": PropertyType.BOOLEAN,
    "boolean": PropertyType.BOOLEAN,
    "decimal": PropertyType.DECIMAL,
    "numeric": PropertyType.DECIMAL,
    "money": PropertyType.DECIMAL,
    "double": PropertyType.DOUBLE,
    "float64": PropertyType.DOUBLE,
    "float": PropertyType.FLOAT,
    "float32": PropertyType.FLOAT,
    "single": PropertyType.FLOAT,
    "real": PropertyType.FLOAT,
    "datetime": PropertyType.DATETIME,
    "date": PropertyType.DATETIME,
    "timestamp": PropertyType.DATETIME,
    "datetimeoffset": PropertyType.DATETIME_OFFSET,
    "timespan": PropertyType.TIMESPAN,
    "time": PropertyType.TIMESPAN,
    "guid": PropertyType.GUID,
    "uuid": PropertyType.GUID,
    "binary": PropertyType.BINARY,
    "bytes": PropertyType.BINARY,
    "byte[]": PropertyType.BINARY,
    "blob": PropertyType.BINARY,
}


def resolve_property_type(type_name: str) -> Optional[PropertyType]:
    """
    Resolve a declared type string to its semantic type.

    Args:
        type_name: Type string as written in the configuration

    Returns:
        Matching PropertyType, or None if the string is not recognized
    """
    return TYPE_ALIASES.get(type_name.strip().lower())


@dataclass
class Property:
    """A single typed field of an entity."""

    name: str
    type: str
    is_primary_key: bool = False
    is_required: bool = False
    max_length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None

    @property
    def property_type(self) -> Optional[PropertyType]:
        """Semantic type of this property, None when unrecognized."""
        return resolve_property_type(self.type)

    @property
    def has_decimal_spec(self) -> bool:
        """True when both precision and scale are declared."""
        return self.precision is not None and self.scale is not None


@dataclass
class Entity:
    """One record type mapped to a database table."""

    name: str
    table_name: str
    properties: List[Property] = field(default_factory=list)

    def get_property(self, name: str) -> Optional[Property]:
        """Get property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @property
    def primary_keys(self) -> List[Property]:
        return [prop for prop in self.properties if prop.is_primary_key]


@dataclass
class Schema:
    """Root of a configuration document: entities in declaration order."""

    entities: List[Entity] = field(default_factory=list)

    def get_entity(self, name: str) -> Optional[Entity]:
        """Get entity by name."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None

    @property
    def entity_names(self) -> List[str]:
        return [entity.name for entity in self.entities]

    def get_summary(self) -> Dict[str, int]:
        """Get counts describing this schema."""
        return {
            "entity_count": len(self.entities),
            "property_count": sum(len(e.properties) for e in self.entities),
            "primary_key_count": sum(len(e.primary_keys) for e in self.entities),
        }
