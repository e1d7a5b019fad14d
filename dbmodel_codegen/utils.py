"""Utility functions for obtaining schema configuration text.

This module reads ``dbconfig.json`` text from files, project directories
and URLs. Parsing is left to the schema loader.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class ConfigSourceError(Exception):
    """Custom exception for configuration source errors."""

    pass


def read_config_file(file_path: str | Path) -> str:
    """Read configuration text from a local file.

    Args:
        file_path: Path to the configuration file.

    Returns:
        The file content decoded as UTF-8.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ConfigSourceError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Reading schema configuration from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        # utf-8-sig tolerates a byte order mark written by Windows editors
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise ConfigSourceError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Read schema configuration from {file_path}")
    return text


def find_config_file(project_dir: str | Path, file_name: str) -> Path | None:
    """Find the configuration file in a project directory tree.

    Matches files whose name ends with ``file_name``; the first match in
    sorted path order wins.

    Args:
        project_dir: Directory to search.
        file_name: Configuration file name, e.g. ``dbconfig.json``.

    Returns:
        Path of the configuration file, or None when there is none.

    Raises:
        ConfigSourceError: If the project directory does not exist.
    """
    project_dir = Path(project_dir)
    if not project_dir.is_dir():
        raise ConfigSourceError(f"Project directory not found: {project_dir}")

    candidates = sorted(
        path
        for path in project_dir.rglob(f"*{file_name}")
        if path.is_file() and path.name.endswith(file_name)
    )

    if not candidates:
        logger.info(f"No {file_name} found under {project_dir}")
        return None

    if len(candidates) > 1:
        logger.warning(
            f"Multiple {file_name} files found; using {candidates[0]}"
        )

    return candidates[0]


def fetch_config_text(url: str, timeout: int = 30) -> str:
    """Fetch configuration text from a URL.

    Args:
        url: URL to fetch the configuration from.
        timeout: Request timeout in seconds.

    Returns:
        The response body as text.

    Raises:
        ConfigSourceError: If URL is invalid or the request fails.
    """
    logger.debug(f"Fetching schema configuration from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise ConfigSourceError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise ConfigSourceError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise ConfigSourceError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise ConfigSourceError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise ConfigSourceError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type and not url.endswith(".json"):
        logger.warning(f"URL {url} does not have JSON content type: {content_type}")

    response.encoding = response.encoding or "utf-8"
    logger.info(f"Fetched schema configuration from {url}")
    return response.text
