"""Utility functions for loading template text and token values.

This module provides functions for loading template text from files and
URLs, reading token files and writing generated code, with proper error
handling.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class TemplateLoaderError(Exception):
    """Custom exception for template and token loading errors."""

    pass


def load_text_from_file(file_path: str | Path) -> tuple[str, str]:
    """Load template text from a local file.

    Args:
        file_path: Path to the file containing the template.

    Returns:
        Tuple of (source description, file text).

    Raises:
        FileNotFoundError: If file doesn't exist.
        TemplateLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load template from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
        logger.info(f"Successfully loaded template from {file_path}")
        return f"📄 {file_path}", text
    except UnicodeDecodeError as e:
        logger.error(f"File is not valid UTF-8 text {file_path}: {e}")
        raise TemplateLoaderError(f"File is not valid UTF-8 text {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise TemplateLoaderError(f"Error reading file {file_path}: {e}") from e


def load_text_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Load template text from a URL.

    Args:
        url: URL to fetch the template from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, response text).

    Raises:
        TemplateLoaderError: If URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load template from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise TemplateLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        logger.info(f"Successfully loaded template from {url}")
        return f"🌐 {url}", response.text

    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise TemplateLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise TemplateLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise TemplateLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise TemplateLoaderError(f"Request error for URL {url}: {e}") from e


def load_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Load template text from either a file or URL.

    Args:
        file_path: Path to local file (mutually exclusive with url).
        url: URL to fetch from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, text).

    Raises:
        TemplateLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise TemplateLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise TemplateLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_text_from_file(file_path)
    else:
        return load_text_from_url(url, timeout)


def load_tokens_file(file_path: str | Path) -> dict[str, Any]:
    """Load token values from a JSON file.

    The file must hold a JSON object mapping each token key to either a
    string (appended verbatim) or a list of strings (each appended as a line).

    Args:
        file_path: Path to the JSON token file.

    Returns:
        The token mapping, in file order.

    Raises:
        FileNotFoundError: If file doesn't exist.
        TemplateLoaderError: If the file is not valid JSON or has the wrong shape.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load tokens from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            tokens = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in token file {file_path}: {e}", exc_info=True)
        raise TemplateLoaderError(f"Invalid JSON in token file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise TemplateLoaderError(f"Error reading file {file_path}: {e}") from e

    if not isinstance(tokens, dict):
        raise TemplateLoaderError(f"Token file must contain a JSON object: {file_path}")

    for key, value in tokens.items():
        if isinstance(value, str):
            continue
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            continue
        raise TemplateLoaderError(
            f"Token '{key}' must be a string or a list of strings in {file_path}"
        )

    logger.info(f"Loaded {len(tokens)} token(s) from {file_path}")
    return tokens


def write_text(file_path: str | Path, text: str) -> Path:
    """Write generated code to a file, creating parent directories.

    Args:
        file_path: Destination path.
        text: Text to write verbatim.

    Returns:
        The path written to.

    Raises:
        TemplateLoaderError: If the file cannot be written.
    """
    file_path = Path(file_path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Error writing file {file_path}: {e}", exc_info=True)
        raise TemplateLoaderError(f"Error writing file {file_path}: {e}") from e

    logger.info(f"Wrote generated code to {file_path}")
    return file_path
