"""File system helpers for configuration and preference storage.

Provides a consistent interface for the small set of file operations the
application needs: reading configuration text, and reading and atomically
rewriting the JSON preference file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from weather_lookup.utils.path_utils import path_resolver

# Type aliases for clarity and documentation
PathLike = str | Path
JsonData = dict[str, Any] | list[Any]


def read_text(file_path: PathLike) -> str:
    """Read text content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The text content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
        UnicodeDecodeError: If the file content cannot be decoded as text
    """
    normalized_path = path_resolver.normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return f.read()


def read_json(file_path: PathLike) -> JsonData:
    """Read and parse JSON content from a file.

    Args:
        file_path: Path to the JSON file (string or Path object)

    Returns:
        The parsed JSON data as a dictionary or list

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file content is not valid JSON
        PermissionError: If the file cannot be read due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return json.load(f)


def ensure_dir_exists(dir_path: PathLike) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Wrapper around path_resolver.ensure_dir_exists for API consistency.

    Args:
        dir_path: Directory path (string or Path object)

    Returns:
        Path to the directory
    """
    return path_resolver.ensure_dir_exists(dir_path)


def file_exists(file_path: PathLike) -> bool:
    """Check if a file exists.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        True if the file exists, False otherwise
    """
    normalized_path = path_resolver.normalize_path(file_path)
    return normalized_path.exists() and normalized_path.is_file()


def atomic_write(file_path: PathLike, content: str, make_dirs: bool = True) -> None:
    """Write text to a file atomically by using a temporary file.

    The file is either completely written or left unchanged, so an
    interrupted write cannot leave truncated JSON behind.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text content to write
        make_dirs: Whether to create parent directories if they don't exist

    Raises:
        FileNotFoundError: If the parent directory does not exist and make_dirs is False
        PermissionError: If the file cannot be written due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    fd, temp_name = tempfile.mkstemp(suffix=normalized_path.suffix, dir=normalized_path.parent)
    temp_file = Path(temp_name)

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)

        # Atomic on POSIX; os.replace also overwrites on Windows
        os.replace(temp_file, normalized_path)
    except Exception:
        if temp_file.exists():
            temp_file.unlink()
        raise


def write_json(file_path: PathLike, data: JsonData, indent: int = 2) -> None:
    """Serialize data as JSON and write it atomically.

    Args:
        file_path: Path to the output JSON file (string or Path object)
        data: Data to be serialized as JSON (dict or list)
        indent: Number of spaces for indentation in the JSON output

    Raises:
        PermissionError: If the file cannot be written due to permissions
        TypeError: If the data contains objects that cannot be serialized to JSON
    """
    atomic_write(file_path, json.dumps(data, indent=indent, ensure_ascii=False))
