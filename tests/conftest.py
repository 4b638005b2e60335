"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import tempfile
import shutil
from datetime import date
from pathlib import Path
from unittest.mock import Mock, patch
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

RELEASE_ID = "76df3287-6cda-33eb-8e9a-044b5e15ffdd"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def no_sleep():
    """Skip rate-limit and backoff pauses."""
    with patch('time.sleep') as mock_sleep:
        yield mock_sleep


@pytest.fixture
def release_id() -> str:
    return RELEASE_ID


@pytest.fixture
def sample_release():
    """Single-medium release with two tracks."""
    from mbcuesheet.models.releases import (
        ArtistCredit, ReleaseGroup, LabelInfo, Track, Medium, ReleaseMetadata
    )
    return ReleaseMetadata(
        id=RELEASE_ID,
        title="Album",
        artist_credits=[ArtistCredit(name="Artist")],
        release_group=ReleaseGroup(genres=["rock", "pop"], first_release_date=date(1997, 5, 21)),
        label_infos=[LabelInfo(name="Label")],
        media=[
            Medium(
                position=1,
                format="CD",
                tracks=[
                    Track(position=1, title="First", length_ms=180000,
                          recording_artist_credits=[ArtistCredit(name="Artist")]),
                    Track(position=2, title="Second", length_ms=200000,
                          recording_artist_credits=[ArtistCredit(name="Artist")]),
                ]
            )
        ]
    )


@pytest.fixture
def multi_disc_release(sample_release):
    """Two-medium release; the second disc has its own title."""
    from mbcuesheet.models.releases import Track, Medium
    sample_release.media.append(
        Medium(
            position=2,
            format="CD",
            title="Bonus",
            tracks=[
                Track(position=1, title="Third", length_ms=61000),
                Track(position=2, title="Fourth", length_ms=45000),
            ]
        )
    )
    return sample_release


@pytest.fixture
def musicbrainz_release_json():
    """Release lookup response in the MusicBrainz JSON format."""
    return {
        "id": RELEASE_ID,
        "title": "Album",
        "artist-credit": [
            {"name": "Artist A", "joinphrase": " & ", "artist": {"name": "Artist A"}},
            {"name": "Artist B", "joinphrase": "", "artist": {"name": "Artist B"}},
        ],
        "genres": [{"name": "release-level genre"}],
        "release-group": {
            "id": "rg-1",
            "first-release-date": "1997-05-21",
            "genres": [{"name": "rock", "count": 3}, {"name": "pop", "count": 1}],
        },
        "label-info": [
            {"catalog-number": "CAT1", "label": {"name": "Label"}},
            {"catalog-number": "CAT2", "label": None},
        ],
        "media": [
            {
                "position": 1,
                "format": "CD",
                "title": "",
                "tracks": [
                    {
                        "position": 1,
                        "number": "1",
                        "title": "First",
                        "length": 180000,
                        "recording": {
                            "title": "First (recording)",
                            "length": 179000,
                            "artist-credit": [{"name": "Artist A", "joinphrase": ""}],
                        },
                    },
                    {
                        "position": 2,
                        "number": "2",
                        "title": "Second",
                        "length": None,
                        "recording": {"title": "Second", "length": 200000},
                    },
                ],
            }
        ],
    }


@pytest.fixture
def mock_response():
    """Factory for fake requests responses."""
    def _make(status_code=200, json_data=None, url="https://example.org/image.jpg",
              content=b"image-bytes", headers=None):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        response.url = url
        response.content = content
        response.headers = headers or {}
        response.json = Mock(return_value=json_data)
        return response
    return _make
