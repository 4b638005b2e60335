"""
Cover Art Archive response models.

The archive answers either with a single image URL (when a specific image such
as the front cover is requested) or with a listing of tagged images. Both
variants carry a ``kind`` tag so callers can dispatch without type checks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CoverArtKind(Enum):
    URL = "url"
    LISTING = "listing"


@dataclass
class CoverArtImage:
    """A single image entry of a Cover Art Archive listing."""
    image: str
    types: List[str] = None
    id: Optional[str] = None
    front: bool = False
    back: bool = False

    def __post_init__(self):
        if self.types is None:
            self.types = []


@dataclass
class CoverArtUrl:
    """Response variant holding one direct image URL."""
    url: str
    kind: CoverArtKind = field(default=CoverArtKind.URL, init=False)


@dataclass
class CoverArtListing:
    """Response variant holding every image of a release."""
    images: List[CoverArtImage] = None
    release: Optional[str] = None
    kind: CoverArtKind = field(default=CoverArtKind.LISTING, init=False)

    def __post_init__(self):
        if self.images is None:
            self.images = []
