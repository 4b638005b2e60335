"""
Path utilities for output files.
"""

import mimetypes
import re
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

from ..core.config import VALIDATION_RULES


def sanitize_filename(filename: str, fallback: str = "unknown") -> str:
    """
    Make a string safe to use as a file name.

    Characters that are invalid on common filesystems are replaced with
    underscores; surrounding whitespace is preserved only inside the name.

    Args:
        filename: Original file name (without directory)
        fallback: Name returned when nothing usable remains

    Returns:
        Sanitized file name
    """
    if not filename:
        return fallback

    # Prevent path traversal
    sanitized = filename.replace('..', '_')
    sanitized = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '_', sanitized)
    sanitized = sanitized.strip().rstrip('.')

    max_length = VALIDATION_RULES["MAX_FILENAME_LENGTH"]
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized or fallback


def extension_from_url(url: str) -> Optional[str]:
    """Return the file extension of a URL path without the dot, or None."""
    suffix = PurePosixPath(urlparse(url).path).suffix
    return suffix[1:] if len(suffix) > 1 else None


def extension_from_content_type(content_type: Optional[str]) -> Optional[str]:
    """Guess a file extension from a Content-Type header value."""
    if not content_type:
        return None
    guessed = mimetypes.guess_extension(content_type.split(';')[0].strip())
    if not guessed:
        return None
    # mimetypes prefers .jpe on some platforms
    return "jpg" if guessed in (".jpe", ".jpeg") else guessed[1:]


def with_extension(stem_path: Path, extension: Optional[str]) -> Path:
    """Append an extension to a path stem, keeping any dots already in the stem."""
    if not extension:
        return stem_path
    return stem_path.parent / f"{stem_path.name}.{extension}"
