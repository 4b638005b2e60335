"""
Utility modules for mbcuesheet.
"""

from .timecode import to_timecode, ms_to_frames, FRAMES_PER_SECOND
from .retry import retry_with_backoff, RetryError
from .path_utils import sanitize_filename, extension_from_url, extension_from_content_type, with_extension

__all__ = [
    'to_timecode',
    'ms_to_frames',
    'FRAMES_PER_SECOND',
    'retry_with_backoff',
    'RetryError',
    'sanitize_filename',
    'extension_from_url',
    'extension_from_content_type',
    'with_extension',
]
