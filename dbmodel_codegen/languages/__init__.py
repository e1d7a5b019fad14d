"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .csharp import (
    CSharpGenerator,
    create_csharp_generator,
    create_legacy_generator,
    create_library_generator,
)

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "create_legacy_generator",
    "create_library_generator",
]
