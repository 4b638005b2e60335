"""
Configuration and input validation utilities.
"""

import importlib
import re
from typing import List, Tuple
from .config import (
    MUSICBRAINZ_CONFIG,
    COVER_ART_CONFIG,
    CUESHEET_CONFIG,
    LOGGING_CONFIG,
    VALIDATION_RULES,
    ERROR_MESSAGES,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    if not MUSICBRAINZ_CONFIG["USER_AGENT"]:
        errors.append("MusicBrainz USER_AGENT must not be empty")

    if MUSICBRAINZ_CONFIG["REQUEST_DELAY"] < 0:
        errors.append("MusicBrainz REQUEST_DELAY must be >= 0")

    if MUSICBRAINZ_CONFIG["TIMEOUT"] < 1:
        errors.append("MusicBrainz TIMEOUT must be >= 1")

    if COVER_ART_CONFIG["DOWNLOAD_DELAY"] < 0:
        errors.append("Cover art DOWNLOAD_DELAY must be >= 0")

    if not COVER_ART_CONFIG["DIR_NAME"]:
        errors.append("Cover art DIR_NAME must not be empty")

    if not CUESHEET_CONFIG["AUDIO_FILE"]:
        errors.append("Cue sheet AUDIO_FILE must not be empty")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_release_id(value: str) -> str:
    """
    Validate a MusicBrainz release identifier.

    Args:
        value: Raw identifier as typed by the user

    Returns:
        The trimmed, lower-cased identifier

    Raises:
        ValueError: If the value is not a MusicBrainz UUID
    """
    if not isinstance(value, str):
        raise ValueError("release_id must be a string")

    value = value.strip()
    if not re.match(VALIDATION_RULES["RELEASE_ID_PATTERN"], value):
        raise ValueError(ERROR_MESSAGES["INVALID_RELEASE_ID"])

    return value.lower()
