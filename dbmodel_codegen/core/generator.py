"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Any, Optional
from pathlib import Path

from ..logging_config import get_logger
from .config import ConfigError, GeneratorConfig, get_config_manager
from .schema import DuplicateNameError, Entity, Schema
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


@dataclass(frozen=True)
class NamedArtifact:
    """One named unit of generated source text."""

    name: str
    content: str


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._check_config()
        self._template_engine = None
        self._setup_templates()

    def _check_config(self):
        """Reject configurations the generator cannot work with."""
        problems = get_config_manager().validate_config(self.config)
        if not problems:
            problems = self.validate_config()
        if problems:
            raise ConfigError("; ".join(problems))

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.get_builtin_templates()
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return a directory whose templates override the built-in ones.

        Returns:
            Path to template directory or None
        """
        if self.config.template_dir:
            return Path(self.config.template_dir)
        return None

    def get_builtin_templates(self) -> Dict[str, str]:
        """Return in-memory templates keyed by name."""
        return {}

    def validate_config(self) -> List[str]:
        """Return language-specific configuration problems."""
        return []

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate_entity(self, entity: Entity) -> str:
        """
        Generate the type declaration for a single entity.

        Args:
            entity: Entity to generate code for

        Returns:
            Complete source text for this entity
        """
        pass

    @abstractmethod
    def generate_context(self, entities: List[Entity]) -> str:
        """
        Generate the aggregate data context declaration.

        Args:
            entities: All entities, in declaration order

        Returns:
            Complete source text for the context
        """
        pass

    def entity_artifact_name(self, entity: Entity) -> str:
        """Name of the artifact holding an entity declaration."""
        return f"{entity.name}{self.config.file_suffix}"

    def context_artifact_name(self) -> str:
        """Name of the artifact holding the context declaration."""
        return f"{self.config.context_name}{self.config.file_suffix}"

    def generate(self, schema: Schema) -> List[NamedArtifact]:
        """
        Generate all artifacts for a schema.

        Entities come first in declaration order, the context last.

        Args:
            schema: Schema to generate code for

        Returns:
            Ordered list of named artifacts
        """
        artifacts = []

        for entity in schema.entities:
            code = self.format_code(self.generate_entity(entity))
            artifacts.append(NamedArtifact(self.entity_artifact_name(entity), code))
            logger.debug("Generated entity %s", entity.name)

        context_code = self.format_code(self.generate_context(schema.entities))
        artifacts.append(NamedArtifact(self.context_artifact_name(), context_code))

        return artifacts

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Validate a schema before generation.

        Language generators should override this to add language-specific
        checks, calling the base implementation first.

        Args:
            schema: Schema to validate

        Returns:
            List of warning messages (empty if no issues)

        Raises:
            DuplicateNameError: If entity, table or property names collide
        """
        warnings = []
        duplicates = []

        # Entity names become file names, which may be case-insensitive
        duplicates.extend(
            f"Duplicate entity name: {name}"
            for name in _find_duplicates(
                (e.name for e in schema.entities), key=str.casefold
            )
        )
        duplicates.extend(
            f"Duplicate table name: {name}"
            for name in _find_duplicates(e.table_name for e in schema.entities)
        )

        for entity in schema.entities:
            duplicates.extend(
                f"Duplicate property name: {entity.name}.{name}"
                for name in _find_duplicates(p.name for p in entity.properties)
            )

            if not entity.properties:
                warnings.append(f"Entity '{entity.name}' has no properties")
                continue

            key_count = len(entity.primary_keys)
            if key_count == 0:
                warnings.append(f"Entity '{entity.name}' has no primary key")
            elif key_count > 1:
                warnings.append(
                    f"Entity '{entity.name}' has {key_count} primary keys"
                )

            for prop in entity.properties:
                if (prop.precision is None) != (prop.scale is None):
                    warnings.append(
                        f"Property {entity.name}.{prop.name} declares only one of "
                        f"precision/scale; no column type is emitted"
                    )

        if duplicates:
            raise DuplicateNameError(duplicates)

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code using the configured line ending
        """
        # Basic cleanup - remove trailing spaces and excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return self.config.line_ending.join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        artifacts: List[NamedArtifact] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            artifacts: Generated artifacts in delivery order
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.artifacts = artifacts or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    @property
    def artifact_names(self) -> List[str]:
        return [artifact.name for artifact in self.artifacts]

    def get_artifact(self, name: str) -> Optional[NamedArtifact]:
        """Get artifact by name."""
        for artifact in self.artifacts:
            if artifact.name == name:
                return artifact
        return None


def _find_duplicates(names, key=None) -> List[str]:
    """Return names whose key was seen before, in first-repeat order."""
    seen = set()
    reported = set()
    duplicates = []
    for name in names:
        name_key = key(name) if key else name
        if name_key in seen and name_key not in reported:
            duplicates.append(name)
            reported.add(name_key)
        seen.add(name_key)
    return duplicates
