"""
Tests for MusicBrainz client.
"""

import pytest
import sys
from datetime import date
from pathlib import Path
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mbcuesheet.clients.musicbrainz import MusicBrainzClient
from mbcuesheet.core.config import USER_AGENT
from mbcuesheet.core.exceptions import APIError, MetadataError, NetworkError
from mbcuesheet.models.releases import ReleaseMetadata
from mbcuesheet.services.cuesheet_service import CuesheetService


class TestMusicBrainzClient:
    """Tests for MusicBrainzClient class."""

    def test_musicbrainz_client_initialization(self):
        """Test MusicBrainzClient initialization."""
        client = MusicBrainzClient()

        assert client.base_url.startswith("https://")
        assert client.request_delay > 0
        assert client.timeout > 0
        assert client.session.headers["User-Agent"] == USER_AGENT

    def test_uses_given_session(self):
        session = requests.Session()
        assert MusicBrainzClient(session).session is session

    @patch('mbcuesheet.clients.musicbrainz.MusicBrainzClient._make_request')
    def test_get_release_request(self, mock_make_request, musicbrainz_release_json, release_id):
        """Test that the lookup asks for every include the cue sheet needs."""
        mock_make_request.return_value = musicbrainz_release_json
        client = MusicBrainzClient()

        client.get_release(release_id)

        url, params = mock_make_request.call_args[0]
        assert url.endswith(f"/release/{release_id}")
        assert params["fmt"] == "json"
        for include in ["artist-credits", "genres", "labels", "recordings", "release-groups"]:
            assert include in params["inc"].split("+")

    @patch('mbcuesheet.clients.musicbrainz.MusicBrainzClient._make_request')
    def test_get_release_parses(self, mock_make_request, musicbrainz_release_json, release_id):
        """Test parsing of a full release response."""
        mock_make_request.return_value = musicbrainz_release_json

        release = MusicBrainzClient().get_release(release_id)

        assert isinstance(release, ReleaseMetadata)
        assert release.id == release_id
        assert release.title == "Album"
        assert [(c.name, c.join_phrase) for c in release.artist_credits] == [
            ("Artist A", " & "), ("Artist B", "")
        ]
        assert release.release_group.genres == ["rock", "pop"]
        assert release.release_group.first_release_date == date(1997, 5, 21)
        assert [li.name for li in release.label_infos] == ["Label", None]

        medium = release.media[0]
        assert medium.position == 1
        assert medium.format == "CD"
        assert medium.title is None

        first, second = medium.tracks
        assert first.title == "First"
        assert first.length_ms == 180000
        assert [c.name for c in first.recording_artist_credits] == ["Artist A"]
        assert second.length_ms == 200000  # falls back to the recording length
        assert second.recording_artist_credits == []

    @patch('mbcuesheet.clients.musicbrainz.MusicBrainzClient._make_request')
    def test_release_level_genres_are_ignored(self, mock_make_request, musicbrainz_release_json):
        """Test that only the release group genres reach the REM GENRE line."""
        musicbrainz_release_json["release-group"]["genres"] = []
        mock_make_request.return_value = musicbrainz_release_json

        release = MusicBrainzClient().get_release("id")

        assert release.release_group.genres == []
        text = CuesheetService().generate(release)[0].text
        assert "REM GENRE" not in text

    @patch('mbcuesheet.clients.musicbrainz.MusicBrainzClient._make_request')
    def test_zero_track_length_is_kept(self, mock_make_request, musicbrainz_release_json):
        """Test that a zero track length does not fall back to the recording length."""
        first = musicbrainz_release_json["media"][0]["tracks"][0]
        first["length"] = 0
        first["recording"]["length"] = 180000
        mock_make_request.return_value = musicbrainz_release_json

        release = MusicBrainzClient().get_release("id")

        assert release.media[0].tracks[0].length_ms == 0
        text = CuesheetService().generate(release)[0].text
        assert text.count("INDEX 01 00:00:00") == 2

    @patch('mbcuesheet.clients.musicbrainz.MusicBrainzClient._make_request')
    def test_missing_release_group(self, mock_make_request, musicbrainz_release_json):
        del musicbrainz_release_json["release-group"]
        mock_make_request.return_value = musicbrainz_release_json

        release = MusicBrainzClient().get_release("id")

        assert release.release_group is None

    @patch('mbcuesheet.clients.musicbrainz.MusicBrainzClient._make_request')
    def test_malformed_release_raises(self, mock_make_request):
        mock_make_request.return_value = {"title": "No id"}

        with pytest.raises(MetadataError):
            MusicBrainzClient().get_release("id")

    @pytest.mark.parametrize("value,expected", [
        ("1997-05-21", date(1997, 5, 21)),
        ("1997-05", date(1997, 5, 1)),
        ("1997", date(1997, 1, 1)),
        ("", None),
        (None, None),
        ("????", None),
        ("1997-13-01", None),
    ])
    def test_parse_date(self, value, expected):
        """Test partial date handling."""
        assert MusicBrainzClient()._parse_date(value) == expected


class TestMakeRequest:
    """Tests for _make_request."""

    def test_success(self, no_sleep, mock_response):
        client = MusicBrainzClient()
        client.session = Mock()
        client.session.get.return_value = mock_response(json_data={"id": "x"})

        assert client._make_request("https://example.org", {}) == {"id": "x"}
        no_sleep.assert_any_call(client.request_delay)

    def test_not_found(self, no_sleep, mock_response):
        client = MusicBrainzClient()
        client.session = Mock()
        client.session.get.return_value = mock_response(status_code=404)

        with pytest.raises(APIError) as exc_info:
            client._make_request("https://example.org", {})

        assert exc_info.value.status_code == 404
        assert client.session.get.call_count == 1

    @pytest.mark.parametrize("status_code", [502, 503, 504])
    def test_gateway_errors_are_retried(self, no_sleep, mock_response, status_code):
        """Test that gateway errors are retried like dropped connections."""
        client = MusicBrainzClient()
        client.session = Mock()
        client.session.get.side_effect = [
            mock_response(status_code=status_code),
            mock_response(json_data={"id": "x"}),
        ]

        assert client._make_request("https://example.org", {}) == {"id": "x"}
        assert client.session.get.call_count == 2

    def test_connection_errors_exhaust_retries(self, no_sleep):
        client = MusicBrainzClient()
        client.session = Mock()
        client.session.get.side_effect = requests.exceptions.ConnectionError("down")

        with pytest.raises(NetworkError):
            client._make_request("https://example.org", {})

        assert client.session.get.call_count > 1

    def test_invalid_json(self, no_sleep, mock_response):
        client = MusicBrainzClient()
        client.session = Mock()
        response = mock_response()
        response.json.side_effect = ValueError("not json")
        client.session.get.return_value = response

        with pytest.raises(APIError):
            client._make_request("https://example.org", {})
