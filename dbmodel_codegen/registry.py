"""
Lookup of target language generators by name or alias.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for unknown languages or bad registrations."""

    pass


class GeneratorRegistry:
    """Maps language names and aliases to generator classes."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator class under a primary name and its aliases.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                is already taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        primary = language.lower()
        alias_keys = [a.lower() for a in aliases or [] if a.lower() != primary]

        for key in alias_keys:
            if key in self._generators:
                raise RegistryError(
                    f"Alias '{key}' conflicts with existing primary language"
                )
            if self._aliases.get(key, primary) != primary:
                raise RegistryError(
                    f"Alias '{key}' already points to '{self._aliases[key]}'"
                )

        self._generators[primary] = generator_class
        for key in alias_keys:
            self._aliases[key] = primary

    def resolve_language(self, language: str) -> str:
        """
        Return the primary name for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        key = language.lower()
        if key in self._generators:
            return key
        if key in self._aliases:
            return self._aliases[key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Instantiate the generator for a language.

        Args:
            language: Language name or alias
            config: GeneratorConfig, dict of overrides, or config file path

        Raises:
            RegistryError: If the language or config type is not supported
            ConfigError: If the configuration is invalid
        """
        primary = self.resolve_language(language)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(primary, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(primary, custom_config=config)
        elif config is None:
            final_config = load_config(primary)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return self._generators[primary](final_config)

    def list_languages(self) -> List[str]:
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        primary = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == primary)

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe a language using its default-configured generator."""
        primary = self.resolve_language(language)
        generator = self.create_generator(primary)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(primary),
            "module": type(generator).__module__,
            "config": generator.config,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global registry, registering the built-in generators on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()

        from .languages.csharp import CSharpGenerator

        _global_registry.register("csharp", CSharpGenerator, aliases=["cs", "c#", "efcore"])
    return _global_registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Language info for every registered language, keyed by primary name."""
    return {language: get_language_info(language) for language in list_supported_languages()}
