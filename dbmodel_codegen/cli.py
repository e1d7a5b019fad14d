"""
Command-line host for model generation.

Finds or receives dbconfig.json text, runs one generation pass and writes
the artifacts to a directory or prints them.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import GenerationResult, GeneratorError
from .core.schema import SchemaError
from .core.templates import TemplateError
from .driver import DirectorySink, generate, run_generation
from .logging_config import configure_logging, get_logger
from .registry import (
    RegistryError,
    get_language_info,
    get_registry,
    list_all_language_info,
)
from .utils import (
    ConfigSourceError,
    fetch_config_text,
    find_config_file,
    read_config_file,
)

logger = get_logger(__name__)

# Initialize rich console
console = Console()

HANDLED_ERRORS = (
    SchemaError,
    GeneratorError,
    ConfigError,
    TemplateError,
    RegistryError,
    ConfigSourceError,
    FileNotFoundError,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dbmodel-codegen",
        description="Generate Entity Framework Core models from a dbconfig.json schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dbmodel-codegen dbconfig.json --output Generated/
  dbmodel-codegen --project-dir src/MyApp --namespace MyApp.Data
  dbmodel-codegen --stdin < dbconfig.json
  dbmodel-codegen --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Schema configuration file")
    input_group.add_argument(
        "--project-dir",
        metavar="DIR",
        help="Search a directory for the configuration file (default: .)",
    )
    input_group.add_argument("--url", help="URL to fetch the configuration from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the configuration from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--language", "-l", default="csharp", help="Target language (default: csharp)"
    )
    parser.add_argument(
        "--output", "-o", metavar="DIR", help="Output directory (default: stdout)"
    )
    parser.add_argument("--config", metavar="FILE", help="Generator configuration file (JSON)")

    # Common options
    parser.add_argument("--namespace", help="Namespace for generated code")
    parser.add_argument("--context-name", help="Name of the generated context class")
    parser.add_argument(
        "--no-strict-types",
        action="store_true",
        help="Copy unrecognized property types verbatim instead of failing",
    )
    parser.add_argument(
        "--no-keyword-escaping",
        action="store_true",
        help="Don't escape identifiers that are language keywords",
    )
    parser.add_argument(
        "--header",
        action="store_true",
        help="Add an auto-generated header comment to each file",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line host.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = create_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        language = get_registry().resolve_language(args.language)
        config = _build_config(args, language)
        schema_text = _get_input_text(args, config)

        return _generate_and_output(schema_text, language, config, args)

    except HANDLED_ERRORS as e:
        logger.error("Generation failed: %s", e)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    config_dict = {}

    if args.namespace:
        config_dict["namespace"] = args.namespace

    if args.context_name:
        config_dict["context_name"] = args.context_name

    if args.no_strict_types:
        config_dict["strict_types"] = False

    if args.no_keyword_escaping:
        config_dict["escape_keywords"] = False

    if args.header:
        config_dict["add_header"] = True

    if args.output:
        config_dict["output_dir"] = args.output

    return load_config(language, custom_config=config_dict, config_file=args.config)


def _get_input_text(args: argparse.Namespace, config: GeneratorConfig) -> Optional[str]:
    """Get configuration text from the selected source; None when absent."""
    if args.file:
        return read_config_file(args.file)

    if args.url:
        return fetch_config_text(args.url)

    if args.stdin:
        return sys.stdin.read()

    project_dir = args.project_dir or "."
    config_path = find_config_file(project_dir, config.config_file_name)
    if config_path is None:
        return None
    return read_config_file(config_path)


def _generate_and_output(
    schema_text: Optional[str],
    language: str,
    config: GeneratorConfig,
    args: argparse.Namespace,
) -> int:
    """Generate code and handle output with rich formatting."""
    if config.output_dir:
        output_dir = Path(config.output_dir)
        result = run_generation(schema_text, DirectorySink(output_dir), language, config)

        for name in result.artifact_names:
            console.print(f"[green]✓[/green] Generated [cyan]{output_dir / name}[/cyan]")
    else:
        result = generate(schema_text, language, config)
        if not result.success:
            raise result.exception
        _print_artifacts(result, language)

    if not result.artifacts:
        console.print("[dim]No entities configured; nothing generated[/dim]")

    if args.verbose and result.metadata:
        _print_metadata(result)

    # Show warnings with rich formatting
    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _print_artifacts(result: GenerationResult, language: str) -> None:
    """Print generated artifacts with syntax highlighting."""
    for artifact in result.artifacts:
        border = "═" * 20
        console.print(f"[green]{border} 📄 {artifact.name} {border}[/green]")
        console.print(Syntax(artifact.content, language, theme="monokai"))


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    info = get_language_info(language)
    config = info["config"]

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name']} Generator", border_style="green")
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Namespace", config.namespace)
    config_table.add_row("Context Name", config.context_name)
    config_table.add_row("Config File Name", config.config_file_name)
    config_table.add_row("File Suffix", config.file_suffix)
    config_table.add_row("Strict Types", str(config.strict_types))
    config_table.add_row("Escape Keywords", str(config.escape_keywords))

    console.print()
    console.print(config_table)

    return 0


if __name__ == "__main__":
    sys.exit(main())
