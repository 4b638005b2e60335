"""
Data models for mbcuesheet.
"""

from .releases import ArtistCredit, ReleaseGroup, LabelInfo, Track, Medium, ReleaseMetadata
from .cover_art import CoverArtKind, CoverArtImage, CoverArtUrl, CoverArtListing
from .cuesheet import Cuesheet

__all__ = [
    'ArtistCredit',
    'ReleaseGroup',
    'LabelInfo',
    'Track',
    'Medium',
    'ReleaseMetadata',
    'CoverArtKind',
    'CoverArtImage',
    'CoverArtUrl',
    'CoverArtListing',
    'Cuesheet',
]
