"""
User interface components for mbcuesheet.
"""

from .cli import CuesheetCLI

__all__ = [
    'CuesheetCLI'
]
