"""
Release, medium and track models.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional


@dataclass
class ArtistCredit:
    """One entry of an artist credit; join_phrase is literal text placed after the name."""
    name: str
    join_phrase: Optional[str] = None


@dataclass
class ReleaseGroup:
    """Release group information relevant to the cue sheet header."""
    genres: List[str] = None
    # Incomplete upstream dates are filled with 01 for missing month/day.
    first_release_date: Optional[date] = None

    def __post_init__(self):
        if self.genres is None:
            self.genres = []


@dataclass
class LabelInfo:
    """Label information; name is None when the entry has no label."""
    name: Optional[str] = None


@dataclass
class Track:
    """Track information from a medium."""
    position: int
    title: str
    length_ms: Optional[int] = None
    recording_artist_credits: List[ArtistCredit] = None

    def __post_init__(self):
        if self.recording_artist_credits is None:
            self.recording_artist_credits = []


@dataclass
class Medium:
    """One disc of a release."""
    position: int = 0
    format: Optional[str] = None
    title: Optional[str] = None
    tracks: List[Track] = None

    def __post_init__(self):
        if self.tracks is None:
            self.tracks = []


@dataclass
class ReleaseMetadata:
    """Release metadata with media and tracks."""
    id: str
    title: str
    artist_credits: List[ArtistCredit] = None
    release_group: Optional[ReleaseGroup] = None
    label_infos: List[LabelInfo] = None
    media: List[Medium] = None

    def __post_init__(self):
        """Initialize lists if not provided."""
        if self.artist_credits is None:
            self.artist_credits = []
        if self.label_infos is None:
            self.label_infos = []
        if self.media is None:
            self.media = []

    @property
    def is_multi_disc(self) -> bool:
        return len(self.media) > 1
