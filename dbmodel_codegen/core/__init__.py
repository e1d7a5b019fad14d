"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, NamedArtifact
from .schema import (
    Schema,
    Entity,
    Property,
    PropertyType,
    SchemaError,
    SchemaParseError,
    SchemaValidationError,
    DuplicateNameError,
    UnrecognizedPropertyTypeError,
    resolve_property_type,
)
from .loader import load_schema
from .naming import NameSanitizer, quote_string
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "NamedArtifact",
    # Schema system - core data structures
    "Schema",
    "Entity",
    "Property",
    "PropertyType",
    "resolve_property_type",
    "load_schema",
    # Schema errors
    "SchemaError",
    "SchemaParseError",
    "SchemaValidationError",
    "DuplicateNameError",
    "UnrecognizedPropertyTypeError",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "quote_string",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
