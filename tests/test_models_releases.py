"""
Tests for release, cover art and cue sheet models.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mbcuesheet.models import (
    ArtistCredit, ReleaseGroup, Track, Medium, ReleaseMetadata,
    CoverArtKind, CoverArtImage, CoverArtUrl, CoverArtListing, Cuesheet,
)


class TestReleaseModels:
    """Tests for release models."""

    def test_defaults(self):
        release = ReleaseMetadata(id="id", title="Album")

        assert release.artist_credits == []
        assert release.label_infos == []
        assert release.media == []
        assert release.release_group is None

    def test_lists_not_shared(self):
        assert Medium().tracks is not Medium().tracks
        assert ReleaseGroup().genres is not ReleaseGroup().genres

    def test_track_defaults(self):
        track = Track(position=1, title="T")

        assert track.length_ms is None
        assert track.recording_artist_credits == []

    def test_artist_credit_join_phrase_optional(self):
        assert ArtistCredit(name="A").join_phrase is None

    def test_is_multi_disc(self):
        release = ReleaseMetadata(id="id", title="Album", media=[Medium(position=1)])
        assert release.is_multi_disc is False

        release.media.append(Medium(position=2))
        assert release.is_multi_disc is True


class TestCoverArtModels:
    """Tests for the cover art response variants."""

    def test_variant_tags(self):
        assert CoverArtUrl(url="http://x").kind is CoverArtKind.URL
        assert CoverArtListing().kind is CoverArtKind.LISTING

    def test_kind_not_settable_in_constructor(self):
        with pytest.raises(TypeError):
            CoverArtUrl(url="http://x", kind=CoverArtKind.LISTING)

    def test_image_defaults(self):
        image = CoverArtImage(image="http://x")
        assert image.types == []
        assert image.front is False


class TestCuesheet:
    """Tests for Cuesheet model."""

    def test_text_terminates_every_line(self):
        assert Cuesheet(name="CD 01", lines=["A", "B"]).text == "A\nB\n"

    def test_filename(self):
        assert Cuesheet(name="CD 01", lines=[]).filename == "CD 01.cue"
