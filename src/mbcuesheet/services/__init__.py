"""
Core services for mbcuesheet.
"""

from .metadata_normalizer import MetadataNormalizer, join_artist_credits, format_release_date
from .cuesheet_builder import CuesheetBuilder
from .cuesheet_service import CuesheetService
from .cover_art_fetcher import CoverArtFetcher

__all__ = [
    'MetadataNormalizer',
    'join_artist_credits',
    'format_release_date',
    'CuesheetBuilder',
    'CuesheetService',
    'CoverArtFetcher'
]
