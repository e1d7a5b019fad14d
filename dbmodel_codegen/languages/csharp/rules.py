"""
Emission rules for Entity Framework Core models.

Pure functions turning one property or entity into declaration fragments.
The entity and context templates only arrange what these functions return.
"""

from dataclasses import dataclass, field
from typing import List

from ...core.naming import NameSanitizer, quote_string
from ...core.schema import Entity, Property
from .types import CSharpType, CSharpTypeMapper


@dataclass(frozen=True)
class MemberDeclaration:
    """Attributes and field declaration for one property."""

    attributes: List[str] = field(default_factory=list)
    declaration: str = ""


def render_attributes(prop: Property, csharp_type: CSharpType) -> List[str]:
    """
    Data annotation attributes for a property, in fixed order.

    Key, then Required, then MaxLength, then the decimal column type.
    Required only applies to reference types.
    """
    attributes = []

    if prop.is_primary_key:
        attributes.append("[Key]")

    if prop.is_required and csharp_type.is_reference:
        attributes.append("[Required]")

    if prop.max_length is not None:
        attributes.append(f"[MaxLength({prop.max_length})]")

    if prop.has_decimal_spec:
        column_type = quote_string(f"decimal({prop.precision}, {prop.scale})")
        attributes.append(f"[Column(TypeName = {column_type})]")

    return attributes


def render_type(csharp_type: CSharpType) -> str:
    """Type text for a field; reference types always carry '?'."""
    return csharp_type.declaration


def render_field(type_text: str, name: str) -> str:
    """Auto-property declaration."""
    return f"public {type_text} {name} {{ get; set; }}"


def render_member(
    prop: Property,
    entity_name: str,
    type_mapper: CSharpTypeMapper,
    sanitizer: NameSanitizer,
    escape: bool = True,
) -> MemberDeclaration:
    """Full declaration block for one property."""
    csharp_type = type_mapper.map_property_type(prop, entity_name)
    name = sanitizer.sanitize_name(prop.name, escape)

    return MemberDeclaration(
        attributes=render_attributes(prop, csharp_type),
        declaration=render_field(render_type(csharp_type), name),
    )


def render_table_annotation(entity: Entity) -> str:
    """Table mapping attribute for an entity class."""
    return f"[Table({quote_string(entity.table_name)})]"


def render_accessor(
    entity: Entity, sanitizer: NameSanitizer, escape: bool = True
) -> str:
    """DbSet accessor for an entity on the context."""
    element_type = sanitizer.sanitize_name(entity.name, escape)
    accessor_name = sanitizer.sanitize_name(entity.table_name, escape)
    return f"public DbSet<{element_type}> {accessor_name} {{ get; set; }}"
