"""
Client modules for external APIs.
"""

from .session import create_session
from .musicbrainz import MusicBrainzClient
from .cover_art_archive import CoverArtArchiveClient

__all__ = [
    'create_session',
    'MusicBrainzClient',
    'CoverArtArchiveClient'
]
