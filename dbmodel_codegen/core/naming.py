"""
Naming utilities for safe code generation.

Checks identifiers against a target language's rules, escapes names that
collide with reserved words and quotes string literals.
"""

import re
from typing import Set, Dict, Optional


# Letter or underscore followed by letters, digits or underscores
IDENTIFIER_PATTERN = re.compile(r"[^\W\d]\w*")


class NameSanitizer:
    """Validates and escapes identifiers for a target language."""

    def __init__(self, reserved_words: Set[str] = None, escape_prefix: str = "",
                 escape_suffix: str = "_", case_sensitive: bool = True):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            escape_prefix: Prefix added to names that are reserved words
            escape_suffix: Suffix added to names that are reserved words
            case_sensitive: Whether reserved words match case-sensitively
        """
        self.case_sensitive = case_sensitive
        self.reserved_words = {
            self._key(word) for word in (reserved_words or set())
        }
        self.escape_prefix = escape_prefix
        self.escape_suffix = escape_suffix if not escape_prefix else ""
        self._name_cache: Dict[str, str] = {}

    def _key(self, name: str) -> str:
        return name if self.case_sensitive else name.lower()

    def _strip_escape(self, name: str) -> str:
        if self.escape_prefix and name.startswith(self.escape_prefix):
            return name[len(self.escape_prefix):]
        return name

    def is_valid_identifier(self, name: str) -> bool:
        """
        Check whether a name can be used as an identifier.

        Names already carrying the escape prefix are checked without it.
        """
        if not isinstance(name, str):
            return False
        return IDENTIFIER_PATTERN.fullmatch(self._strip_escape(name)) is not None

    def is_reserved(self, name: str) -> bool:
        """Check whether a name is a reserved word."""
        return self._key(name) in self.reserved_words

    def sanitize_name(self, name: str, escape: bool = True) -> str:
        """
        Make a valid name safe for use in generated code.

        Args:
            name: Identifier to emit
            escape: Whether reserved words get escaped

        Returns:
            The name, escaped if it is a reserved word
        """
        if not escape:
            return name

        if name in self._name_cache:
            return self._name_cache[name]

        final_name = name
        if self.is_reserved(name):
            final_name = f"{self.escape_prefix}{name}{self.escape_suffix}"

        self._name_cache[name] = final_name
        return final_name

    def find_problem(self, name: str, kind: str) -> Optional[str]:
        """Describe why a name is unusable, or None if it is fine."""
        if not self.is_valid_identifier(name):
            return f"Invalid {kind} name: {name!r}"
        return None


def quote_string(value: str) -> str:
    """Render a value as a double-quoted C-style string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'
