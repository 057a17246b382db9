"""
Filesystem helpers for icon discovery and generated output. All text is UTF-8.
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Union

from svgify.errors import ConfigurationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_directory(path: PathLike) -> Path:
    """
    Create a directory (and its parents) if it does not exist.

    Args:
        path: Directory path

    Returns:
        The directory as a Path
    """
    path = Path(path)
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory: {path}")
    return path


def list_svg_files(directory: PathLike, sort: bool = True) -> List[str]:
    """
    List the .svg regular files directly inside a directory.

    Args:
        directory: Directory to scan (non-recursive)
        sort: Whether to return names in lexical order

    Returns:
        File names (not paths) ending in .svg
    """
    names = [
        entry.name
        for entry in Path(directory).iterdir()
        if entry.name.endswith(".svg") and entry.is_file()
    ]
    return sorted(names) if sort else names


def read_svg(path: PathLike) -> str:
    """Read an icon source file."""
    return Path(path).read_text(encoding="utf-8")


def write_source(path: PathLike, content: str) -> Path:
    """
    Write a generated source file, replacing whatever was there.

    Args:
        path: Destination file
        content: Source code

    Returns:
        The written path
    """
    path = Path(path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        raise
    logger.debug(f"Wrote {path} ({len(content)} chars)")
    return path


def load_config(path: PathLike) -> Any:
    """
    Read a JSON configuration file.

    Args:
        path: Configuration file

    Returns:
        The decoded JSON document

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not valid JSON
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path} is not valid JSON: {e}") from e
