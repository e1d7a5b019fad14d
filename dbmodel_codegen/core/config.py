"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields, asdict


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_dir: Optional[str] = None
    namespace: str = "GeneratedModels"
    context_name: str = "GeneratedDbContext"
    config_file_name: str = "dbconfig.json"
    file_suffix: str = ".g.cs"

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # Type handling
    strict_types: bool = True
    escape_keywords: bool = True

    # Additional metadata
    add_header: bool = False
    template_dir: Optional[str] = None

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


# JSON value types accepted for each known setting
FIELD_TYPES: Dict[str, tuple] = {
    "output_dir": (str, Path, type(None)),
    "namespace": (str,),
    "context_name": (str,),
    "config_file_name": (str,),
    "file_suffix": (str,),
    "indent_size": (int,),
    "use_tabs": (bool,),
    "line_ending": (str,),
    "strict_types": (bool,),
    "escape_keywords": (bool,),
    "add_header": (bool,),
    "template_dir": (str, Path, type(None)),
    "custom": (dict,),
}


def check_field_types(values: Dict[str, Any]) -> List[str]:
    """Report settings whose values have the wrong type."""
    problems = []
    for key, expected in FIELD_TYPES.items():
        if key not in values:
            continue
        value = values[key]
        # bool is an int subclass; only bool fields accept it
        if isinstance(value, bool) and bool not in expected:
            matches = False
        else:
            matches = isinstance(value, expected)
        if not matches:
            names = " or ".join(
                "null" if t is type(None) else t.__name__ for t in expected
            )
            problems.append(
                f"{key} must be {names}, got {type(value).__name__}: {value!r}"
            )
    return problems


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        # C# / Entity Framework Core defaults
        self._configs["csharp"] = {
            "namespace": "GeneratedModels",
            "context_name": "GeneratedDbContext",
            "config_file_name": "dbconfig.json",
            "file_suffix": ".g.cs",
            "strict_types": True,
            "escape_keywords": True,
            "custom": {
                "context_base_class": "DbContext",
                "context_options_type": "DbContextOptions",
            },
        }

    def get_config(self, language: str, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults; copy nested custom so defaults stay untouched
        base_config = dict(self._configs.get(language, {}))
        base_config["custom"] = dict(base_config.get("custom", {}))

        # Load from file if provided
        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    @staticmethod
    def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """Merge overrides into target, combining the custom dicts."""
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                target.setdefault("custom", {}).update(value)
            else:
                target[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        # Extract known fields
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        problems = check_field_types(config_args)
        if problems:
            raise ConfigError("Invalid configuration: " + "; ".join(problems))

        # Add unknown keys to the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        config_dict.update(config_dict.pop("custom"))

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False, default=str)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate language-independent settings.

        Returns:
            List of validation problems
        """
        problems = check_field_types(
            {f.name: getattr(config, f.name) for f in fields(config)}
        )
        if problems:
            return problems

        if config.indent_size < 1:
            problems.append(f"indent_size must be positive: {config.indent_size}")

        if config.line_ending not in {"\n", "\r\n"}:
            problems.append(f"Invalid line_ending: {config.line_ending!r}")

        if not config.file_suffix:
            problems.append("file_suffix must not be empty")

        if not config.config_file_name:
            problems.append("config_file_name must not be empty")

        return problems


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "csharp", custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
