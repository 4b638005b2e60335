"""
mbcuesheet - generate CD cue sheets and cover art from MusicBrainz releases.
"""

from .core.config import PROJECT_VERSION as __version__

__all__ = ['__version__']
