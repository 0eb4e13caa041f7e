"""
Safe file operations for the quality suite.

Reads never raise anything but FileAccessError, so callers can skip a file
with a single except clause.
"""

from pathlib import Path

from .exceptions import FileAccessError


def safe_read_file(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Read a text file without newline translation.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")
