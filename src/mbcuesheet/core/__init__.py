"""
Core module for mbcuesheet.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import validate_configuration, validate_and_raise, check_dependencies, validate_release_id

__all__ = [
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'check_dependencies',
    'validate_release_id',
    'CuesheetError',
    'MetadataError',
    'ConfigurationError',
    'APIError',
    'NetworkError',
]
