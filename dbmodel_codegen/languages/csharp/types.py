"""
C#-specific type system for code generation.

Maps semantic property types to C# type tokens through an explicit table.
"""

from dataclasses import dataclass
from typing import Dict

from ...core.schema import (
    Property,
    PropertyType,
    UnrecognizedPropertyTypeError,
)


@dataclass(frozen=True)
class CSharpType:
    """
    Immutable representation of a C# type.

    Reference types are always declared nullable in generated code.
    """

    name: str  # The C# type token (e.g., "int", "string")
    is_reference: bool = False  # Reference type; gets the nullable marker

    @property
    def declaration(self) -> str:
        """Type as written in a field declaration."""
        return f"{self.name}?" if self.is_reference else self.name


CSHARP_TYPES: Dict[PropertyType, CSharpType] = {
    PropertyType.STRING: CSharpType("string", is_reference=True),
    PropertyType.INTEGER: CSharpType("int"),
    PropertyType.LONG: CSharpType("long"),
    PropertyType.SHORT: CSharpType("short"),
    PropertyType.BYTE: CSharpType("byte"),
    PropertyType.BOOLEAN: CSharpType("bool"),
    PropertyType.DECIMAL: CSharpType("decimal"),
    PropertyType.DOUBLE: CSharpType("double"),
    PropertyType.FLOAT: CSharpType("float"),
    PropertyType.DATETIME: CSharpType("DateTime"),
    PropertyType.DATETIME_OFFSET: CSharpType("DateTimeOffset"),
    PropertyType.TIMESPAN: CSharpType("TimeSpan"),
    PropertyType.GUID: CSharpType("Guid"),
    PropertyType.BINARY: CSharpType("byte[]", is_reference=True),
}


class CSharpTypeMapper:
    """Resolves property declarations to C# types."""

    def __init__(self, strict: bool = True):
        """
        Args:
            strict: Reject unrecognized type strings instead of passing them through
        """
        self.strict = strict

    def map_property_type(self, prop: Property, entity_name: str) -> CSharpType:
        """
        Map a property to its C# type.

        Args:
            prop: Property to map
            entity_name: Owning entity, used in error messages

        Returns:
            The C# type for this property

        Raises:
            UnrecognizedPropertyTypeError: If the type is unknown in strict mode
        """
        property_type = prop.property_type
        if property_type is not None:
            return CSHARP_TYPES[property_type]

        if self.strict:
            raise UnrecognizedPropertyTypeError(entity_name, prop.name, prop.type)

        # Literal pass-through
        return CSharpType(prop.type)
