"""
C# code generator implementation.

Generates Entity Framework Core entity classes and a DbContext from a schema.
"""

from typing import Dict, List, Optional, Any

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.schema import Entity, Schema, SchemaValidationError
from ...logging_config import get_logger
from .config import (
    AUTO_GENERATED_HEADER,
    CONTEXT_USINGS,
    ENTITY_USINGS,
    SHADOWED_TYPE_NAMES,
    get_context_base_class,
    get_context_options_type,
    validate_csharp_config,
)
from .naming import create_csharp_sanitizer
from .rules import render_accessor, render_member, render_table_annotation
from .templates import BUILTIN_TEMPLATES, CONTEXT_TEMPLATE_NAME, ENTITY_TEMPLATE_NAME
from .types import CSharpTypeMapper

logger = get_logger(__name__)


class CSharpGenerator(CodeGenerator):
    """Code generator for EF Core entity classes and a DbContext."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)

        self.sanitizer = create_csharp_sanitizer()
        self.type_mapper = CSharpTypeMapper(strict=self.config.strict_types)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def get_builtin_templates(self) -> Dict[str, str]:
        return dict(BUILTIN_TEMPLATES)

    def validate_config(self) -> List[str]:
        return validate_csharp_config(self.config)

    def generate_entity(self, entity: Entity) -> str:
        """Generate the entity class declaration using templates."""
        escape = self.config.escape_keywords

        members = [
            render_member(prop, entity.name, self.type_mapper, self.sanitizer, escape)
            for prop in entity.properties
        ]

        context = self._base_context(ENTITY_USINGS)
        context.update(
            {
                "table_annotation": render_table_annotation(entity),
                "class_name": self.sanitizer.sanitize_name(entity.name, escape),
                "members": members,
            }
        )

        return self.render_template(ENTITY_TEMPLATE_NAME, context)

    def generate_context(self, entities: List[Entity]) -> str:
        """Generate the DbContext declaration using templates."""
        escape = self.config.escape_keywords

        context = self._base_context(CONTEXT_USINGS)
        context.update(
            {
                "context_name": self.config.context_name,
                "base_class": get_context_base_class(self.config),
                "options_type": get_context_options_type(self.config),
                "accessors": [
                    render_accessor(entity, self.sanitizer, escape)
                    for entity in entities
                ],
            }
        )

        return self.render_template(CONTEXT_TEMPLATE_NAME, context)

    def _base_context(self, usings: List[str]) -> Dict[str, Any]:
        """Template variables shared by all templates."""
        indent = self.config.indent
        return {
            "header": AUTO_GENERATED_HEADER if self.config.add_header else None,
            "usings": usings,
            "namespace": self.config.namespace,
            "indent": indent,
            "member_indent": indent * 2,
        }

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Validate schema for C# generation.

        Raises:
            SchemaValidationError: If names cannot be emitted as C# identifiers
            UnrecognizedPropertyTypeError: If a type is unknown in strict mode
        """
        warnings = super().validate_schema(schema)
        problems = []
        escape = self.config.escape_keywords

        for entity in schema.entities:
            problems.extend(
                self._name_problems(entity.name, "entity", escape)
            )
            problems.extend(
                self._name_problems(entity.table_name, "table", escape)
            )

            if entity.name == self.config.context_name:
                problems.append(
                    f"Entity '{entity.name}' has the same name as the context class"
                )

            if entity.table_name == self.config.context_name:
                problems.append(
                    f"Table name '{entity.table_name}' of entity '{entity.name}' "
                    f"has the same name as the context class"
                )

            if entity.name in SHADOWED_TYPE_NAMES:
                warnings.append(
                    f"Entity '{entity.name}' shadows a type used by the generated code"
                )

            for prop in entity.properties:
                label = f"{entity.name}.{prop.name}"
                problems.extend(self._name_problems(prop.name, "property", escape))

                if prop.name == entity.name:
                    problems.append(
                        f"Property {label} has the same name as its enclosing class"
                    )

                csharp_type = self.type_mapper.map_property_type(prop, entity.name)

                if prop.max_length is not None and not csharp_type.is_reference:
                    warnings.append(
                        f"Property {label} declares maxLength on non-string type "
                        f"'{csharp_type.name}'"
                    )

                if prop.is_required and not csharp_type.is_reference:
                    logger.debug("isRequired has no effect on %s", label)

                if escape and self.sanitizer.is_reserved(prop.name):
                    warnings.append(
                        f"Property {label} is a C# keyword and is emitted as "
                        f"@{prop.name}"
                    )

            if escape and self.sanitizer.is_reserved(entity.name):
                warnings.append(
                    f"Entity '{entity.name}' is a C# keyword and is emitted as "
                    f"@{entity.name}"
                )

        if problems:
            raise SchemaValidationError(problems)

        return warnings

    def _name_problems(self, name: str, kind: str, escape: bool) -> List[str]:
        problem = self.sanitizer.find_problem(name, kind)
        if problem:
            return [problem]
        if not escape and self.sanitizer.is_reserved(name):
            return [f"Invalid {kind} name: {name!r} is a C# keyword"]
        return []


# Factory functions with template-based generators
def create_csharp_generator(config: Optional[Dict[str, Any]] = None) -> CSharpGenerator:
    """Create a C# generator with default configuration plus overrides."""
    return CSharpGenerator(load_config("csharp", custom_config=config))
