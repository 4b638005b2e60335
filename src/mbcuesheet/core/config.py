"""
Configuration for mbcuesheet.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "mbcuesheet"
PROJECT_VERSION = "0.1.0"
PROJECT_DESCRIPTION = "Generate CD cue sheets and cover art from MusicBrainz releases"

# Sent with every request to MusicBrainz and the Cover Art Archive.
USER_AGENT = f"{PROJECT_NAME}/{PROJECT_VERSION} ( https://github.com/mbcuesheet/mbcuesheet )"

# MusicBrainz Configuration
MUSICBRAINZ_CONFIG = {
    "BASE_URL": "https://musicbrainz.org/ws/2",
    "USER_AGENT": USER_AGENT,
    "REQUEST_DELAY": 1.0,  # MusicBrainz allows 1 request per second
    "TIMEOUT": 30,
    "INCLUDES": ["artist-credits", "genres", "labels", "recordings", "release-groups"],
}

# Cover Art Archive Configuration
COVER_ART_CONFIG = {
    "BASE_URL": "https://coverartarchive.org",
    "USER_AGENT": USER_AGENT,
    "DIR_NAME": "Cover",
    "DOWNLOAD_DELAY": 1.0,  # seconds between image downloads
    "TIMEOUT": 30,
}

# Cue sheet output
CUESHEET_CONFIG = {
    "AUDIO_FILE": "CDImage.flac",
    "FILE_TYPE": "WAVE",
    "EXTENSION": ".cue",
    "ENCODING": "utf-8",
}

# API Limits
API_LIMITS = {
    "MAX_RETRIES": 3,
    "BACKOFF_FACTOR": 2,
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("MBCUESHEET_LOG_LEVEL", "INFO").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Validation Rules
VALIDATION_RULES = {
    "RELEASE_ID_PATTERN": r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
    "MAX_FILENAME_LENGTH": 200,
}

# Error Messages
ERROR_MESSAGES = {
    "INVALID_RELEASE_ID": "Release ID must be a MusicBrainz identifier (UUID).",
    "MISSING_TRACK_LENGTH": "Track {position} on medium {medium} has no length; later track offsets cannot be computed.",
    "COVER_ART_FAILED": "Failed to download cover art",
}
