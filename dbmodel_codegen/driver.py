"""
Generation driver.

Runs one load, validate, emit and deliver pass. Artifacts are produced in
full before any of them reaches a sink, so a failed or cancelled run
delivers nothing.
"""

import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .logging_config import get_logger
from .core.config import ConfigError, GeneratorConfig
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, NamedArtifact
from .core.loader import describe_entities, load_schema
from .core.schema import SchemaError
from .core.templates import TemplateError
from .registry import RegistryError, get_generator

logger = get_logger(__name__)


class GenerationCancelledError(GeneratorError):
    """Raised when a run is cancelled before its artifacts are delivered."""

    pass


class CancellationToken:
    """Cooperative cancellation signal shared with a host thread."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.is_cancelled:
            raise GenerationCancelledError("Generation was cancelled")


class ArtifactSink(ABC):
    """Receives generated artifacts, one call per artifact."""

    def __init__(self):
        self._delivered: List[str] = []

    @property
    def delivered_names(self) -> List[str]:
        return list(self._delivered)

    def add_source(self, name: str, content: str) -> None:
        """
        Deliver one artifact.

        Raises:
            GeneratorError: If an artifact with this name was already delivered
        """
        if name in self._delivered:
            raise GeneratorError(f"Artifact delivered twice: {name}")
        self._write(name, content)
        self._delivered.append(name)

    @abstractmethod
    def _write(self, name: str, content: str) -> None:
        pass


class CollectingSink(ArtifactSink):
    """Keeps delivered artifacts in memory, in delivery order."""

    def __init__(self):
        super().__init__()
        self.artifacts: List[NamedArtifact] = []

    def _write(self, name: str, content: str) -> None:
        self.artifacts.append(NamedArtifact(name, content))


class DirectorySink(ArtifactSink):
    """Writes each artifact as a UTF-8 file into a directory."""

    def __init__(self, output_dir: Union[str, Path]):
        super().__init__()
        self.output_dir = Path(output_dir)

    def _write(self, name: str, content: str) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / name
        try:
            # newline="" keeps the configured line endings untouched
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise GeneratorError(f"Failed to write {path}: {e}") from e
        logger.info("Wrote %s", path)


def generate_artifacts(
    schema_text: Optional[str],
    generator: CodeGenerator,
    cancellation: Optional[CancellationToken] = None,
    warnings: Optional[List[str]] = None,
) -> List[NamedArtifact]:
    """
    Produce all artifacts for a configuration text.

    Args:
        schema_text: Raw configuration text, None when absent
        generator: Target language generator
        cancellation: Optional cancellation token
        warnings: Optional list that receives validation warnings

    Returns:
        Entity artifacts in declaration order followed by the context;
        empty when there is nothing to generate

    Raises:
        SchemaError: If the text is malformed or fails validation
        GenerationCancelledError: If cancellation was requested
    """
    if cancellation:
        cancellation.raise_if_cancelled()

    schema = load_schema(schema_text)
    if schema is None:
        logger.info("No entities configured; nothing to generate")
        return []

    schema_warnings = generator.validate_schema(schema)
    for warning in schema_warnings:
        logger.warning(warning)
    if warnings is not None:
        warnings.extend(schema_warnings)

    logger.debug("Generating %s", describe_entities(schema.entities))
    artifacts = generator.generate(schema)

    if cancellation:
        cancellation.raise_if_cancelled()

    return artifacts


def generate(
    schema_text: Optional[str],
    language: str = "csharp",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    cancellation: Optional[CancellationToken] = None,
) -> GenerationResult:
    """
    Generate code with error handling.

    Args:
        schema_text: Raw configuration text, None when absent
        language: Target language name or alias
        config: Generator configuration, dict of overrides or config file path
        cancellation: Optional cancellation token

    Returns:
        GenerationResult with artifacts, warnings, and metadata
    """
    try:
        generator = get_generator(language, config)
        warnings: List[str] = []
        artifacts = generate_artifacts(schema_text, generator, cancellation, warnings)
    except (SchemaError, GeneratorError, ConfigError, TemplateError, RegistryError) as e:
        logger.debug("Generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    entity_artifacts = artifacts[:-1]
    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "entity_count": len(entity_artifacts),
        "artifact_count": len(artifacts),
    }

    return GenerationResult(artifacts, warnings, metadata)


def run_generation(
    schema_text: Optional[str],
    sink: ArtifactSink,
    language: str = "csharp",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    cancellation: Optional[CancellationToken] = None,
) -> GenerationResult:
    """
    Generate artifacts and deliver them to a sink.

    Failures are raised to the caller and nothing is delivered.

    Returns:
        The successful GenerationResult
    """
    result = generate(schema_text, language, config, cancellation)
    if not result.success:
        raise result.exception

    if cancellation:
        cancellation.raise_if_cancelled()

    for artifact in result.artifacts:
        sink.add_source(artifact.name, artifact.content)

    logger.info("Delivered %d artifacts", len(result.artifacts))
    return result
