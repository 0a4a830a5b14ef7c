"""
Validation utilities - Pure validation functions.
"""
from pathlib import PurePath


def validate_filename(filename: str) -> str:
    """
    Validate an uploaded filename and return its base name.

    Raises:
        ValueError: If filename is invalid
    """
    if not filename or not filename.strip():
        raise ValueError("Filename cannot be empty")

    # Keep just the final component, whatever separator the client used
    clean_name = PurePath(filename.replace("\\", "/")).name.strip()

    if not clean_name or clean_name in (".", ".."):
        raise ValueError("Invalid filename")

    return clean_name


def validate_file_type_hint(file_type: str) -> str:
    """
    Normalize a file type hint (".CSV" -> "csv").

    Raises:
        ValueError: If the hint contains path separators
    """
    hint = (file_type or "").strip()
    found_chars = [char for char in ['/', '\\'] if char in hint]
    if found_chars:
        raise ValueError(f"File type cannot contain: {', '.join(found_chars)}")
    return hint.lstrip(".").lower()
