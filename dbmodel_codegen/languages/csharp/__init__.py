"""
C# code generator module.

Generates Entity Framework Core entity classes and a DbContext.
"""

from .config import LEGACY_CONFIG, LIBRARY_CONFIG
from .generator import CSharpGenerator, create_csharp_generator
from .naming import create_csharp_sanitizer
from .types import CSharpType, CSharpTypeMapper

__all__ = [
    "CSharpGenerator",
    "CSharpType",
    "CSharpTypeMapper",
    "create_csharp_sanitizer",
    # Factory functions
    "create_csharp_generator",
    "create_library_generator",
    "create_legacy_generator",
]


def create_library_generator():
    """
    Create generator for models shipped in a class library.

    Features:
    - Data.Models namespace
    - AppDbContext context class
    - Auto-generated header comment
    """
    return create_csharp_generator(LIBRARY_CONFIG)


def create_legacy_generator():
    """
    Create generator that copies type names verbatim.

    Features:
    - Unrecognized types pass through unchanged
    - No keyword escaping
    """
    return create_csharp_generator(LEGACY_CONFIG)
