"""
dbmodel-codegen

Generates Entity Framework Core model classes and a DbContext from a
declarative ``dbconfig.json`` schema.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, NamedArtifact
from .core.schema import (
    Schema,
    Entity,
    Property,
    PropertyType,
    SchemaError,
    SchemaParseError,
    SchemaValidationError,
    DuplicateNameError,
    UnrecognizedPropertyTypeError,
)
from .core.loader import load_schema
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .driver import (
    ArtifactSink,
    CancellationToken,
    CollectingSink,
    DirectorySink,
    GenerationCancelledError,
    generate,
    generate_artifacts,
    run_generation,
)

# Version info
__version__ = "0.1.0"


def quick_generate(schema_text, language="csharp", **options):
    """
    Quick code generation from configuration text.

    Args:
        schema_text: dbconfig.json content
        language: Target language
        **options: Generator options

    Returns:
        Dict mapping artifact name to generated code
    """
    result = generate(schema_text, language, options or None)

    if result.success:
        return {artifact.name: artifact.content for artifact in result.artifacts}
    raise result.exception


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "NamedArtifact",
    "Schema",
    "Entity",
    "Property",
    "PropertyType",
    "SchemaError",
    "SchemaParseError",
    "SchemaValidationError",
    "DuplicateNameError",
    "UnrecognizedPropertyTypeError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "ArtifactSink",
    "CancellationToken",
    "CollectingSink",
    "DirectorySink",
    "GenerationCancelledError",
    "generate",
    "generate_artifacts",
    "run_generation",
    "quick_generate",
    "load_schema",
    "load_config",
    "get_generator",
    "get_registry",
    "list_supported_languages",
]
