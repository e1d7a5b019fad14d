"""
C#-specific configuration and validation.

Extends the base configuration system with Entity Framework Core settings.
"""

from typing import List

from ...core.config import GeneratorConfig
from .naming import create_csharp_sanitizer, is_valid_namespace


ENTITY_USINGS = [
    "System",
    "System.ComponentModel.DataAnnotations",
    "System.ComponentModel.DataAnnotations.Schema",
]

CONTEXT_USINGS = ["Microsoft.EntityFrameworkCore"]

AUTO_GENERATED_HEADER = "<auto-generated />"

# Types and attributes the generated code refers to by simple name
SHADOWED_TYPE_NAMES = frozenset(
    {
        "DateTime",
        "DateTimeOffset",
        "TimeSpan",
        "Guid",
        "DbContext",
        "DbContextOptions",
        "DbSet",
        "Table",
        "Key",
        "Required",
        "MaxLength",
        "Column",
    }
)


def get_context_base_class(config: GeneratorConfig) -> str:
    return config.custom.get("context_base_class", "DbContext")


def get_context_options_type(config: GeneratorConfig) -> str:
    return config.custom.get("context_options_type", "DbContextOptions")


def validate_csharp_config(config: GeneratorConfig) -> List[str]:
    """
    Validate C#-specific configuration.

    Returns:
        List of configuration problems
    """
    problems = []
    sanitizer = create_csharp_sanitizer()

    if not is_valid_namespace(config.namespace):
        problems.append(f"Invalid C# namespace: {config.namespace}")

    if not sanitizer.is_valid_identifier(config.context_name) or sanitizer.is_reserved(
        config.context_name
    ):
        problems.append(f"Invalid C# context name: {config.context_name}")

    for key in ("context_base_class", "context_options_type"):
        value = config.custom.get(key)
        if value is not None and not is_valid_namespace(str(value)):
            problems.append(f"Invalid {key}: {value}")

    return problems


# Default configurations for different use cases
LIBRARY_CONFIG = {
    "namespace": "Data.Models",
    "context_name": "AppDbContext",
    "add_header": True,
}

LEGACY_CONFIG = {
    "strict_types": False,
    "escape_keywords": False,
}
