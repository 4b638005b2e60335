"""
MusicBrainz Client Module
Fetches release metadata from the MusicBrainz web service.
"""

import time
from datetime import date
from typing import Dict, List, Optional, Any

import requests

from ..models.releases import ArtistCredit, ReleaseGroup, LabelInfo, Track, Medium, ReleaseMetadata
from ..core.config import MUSICBRAINZ_CONFIG
from ..core.exceptions import APIError, MetadataError, NetworkError
from ..core.logger import get_logger
from ..utils.retry import retry_with_backoff
from .session import create_session

logger = get_logger("clients.musicbrainz")

# Gateway errors MusicBrainz answers with when overloaded or rate limiting.
# Raised as NetworkError so retry_with_backoff treats them like a dropped
# connection.
TRANSIENT_STATUS_CODES = {502, 503, 504}


class MusicBrainzClient:
    """MusicBrainz release lookup client."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.base_url = MUSICBRAINZ_CONFIG["BASE_URL"]
        self.request_delay = MUSICBRAINZ_CONFIG["REQUEST_DELAY"]
        self.timeout = MUSICBRAINZ_CONFIG["TIMEOUT"]
        self.includes = MUSICBRAINZ_CONFIG["INCLUDES"]
        self.session = session or create_session()

    @retry_with_backoff(exceptions=(NetworkError,))
    def _make_request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a GET request and return the decoded JSON body.

        Raises:
            NetworkError: On connection problems or throttling (retried)
            APIError: On any other non-success status
        """
        logger.debug(f"GET {url} {params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to MusicBrainz failed: {e}") from e
        finally:
            # Rate limiting - one request per second, whatever the outcome
            time.sleep(self.request_delay)

        # 502/503/504 are retried, every other failure status is final
        if response.status_code in TRANSIENT_STATUS_CODES:
            raise NetworkError(f"MusicBrainz is unavailable (HTTP {response.status_code})")
        if response.status_code == 404:
            raise APIError("Release not found on MusicBrainz", response.status_code)
        if not response.ok:
            raise APIError(f"MusicBrainz returned HTTP {response.status_code}", response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"MusicBrainz returned invalid JSON: {e}", response.status_code) from e

    def get_release(self, release_mbid: str) -> ReleaseMetadata:
        """
        Get release metadata including artist credits, genres, labels,
        recordings and the release group.

        Args:
            release_mbid: MusicBrainz release ID

        Returns:
            Parsed release metadata
        """
        url = f"{self.base_url}/release/{release_mbid}"
        params = {
            'inc': '+'.join(self.includes),
            'fmt': 'json'
        }
        data = self._make_request(url, params)
        return self._parse_release(data)

    def _parse_release(self, data: Dict[str, Any]) -> ReleaseMetadata:
        """Parse a release lookup response."""
        try:
            release_id = data['id']
            title = data.get('title') or ''

            return ReleaseMetadata(
                id=release_id,
                title=title,
                artist_credits=self._parse_artist_credit(data.get('artist-credit')),
                release_group=self._parse_release_group(data.get('release-group')),
                label_infos=[
                    LabelInfo(name=(label_info.get('label') or {}).get('name'))
                    for label_info in data.get('label-info') or []
                ],
                media=[self._parse_medium(medium) for medium in data.get('media') or []]
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MetadataError(f"Malformed release data from MusicBrainz: {e!r}") from e

    def _parse_artist_credit(self, artist_credits: Optional[List[Dict[str, Any]]]) -> List[ArtistCredit]:
        """Parse an artist-credit list, keeping credited names and join phrases."""
        credits = []
        for credit in artist_credits or []:
            name = credit.get('name') or (credit.get('artist') or {}).get('name', '')
            credits.append(ArtistCredit(name=name, join_phrase=credit.get('joinphrase')))
        return credits

    def _parse_genres(self, genres: Optional[List[Dict[str, Any]]]) -> List[str]:
        return [genre['name'] for genre in genres or [] if genre.get('name')]

    def _parse_release_group(self, release_group: Optional[Dict[str, Any]]) -> Optional[ReleaseGroup]:
        if release_group is None:
            return None
        return ReleaseGroup(
            genres=self._parse_genres(release_group.get('genres')),
            first_release_date=self._parse_date(release_group.get('first-release-date'))
        )

    def _parse_date(self, value: Optional[str]) -> Optional[date]:
        """
        Parse a MusicBrainz partial date.

        Missing month or day parts are filled with 01, so "1997" becomes
        1997-01-01. Empty or malformed values give None.
        """
        if not value:
            return None
        parts = value.split('-')
        try:
            year = int(parts[0])
            month = int(parts[1]) if len(parts) > 1 else 1
            day = int(parts[2]) if len(parts) > 2 else 1
            return date(year, month, day)
        except ValueError:
            logger.debug(f"Ignoring unparseable release date {value!r}")
            return None

    def _parse_medium(self, data: Dict[str, Any]) -> Medium:
        return Medium(
            position=data.get('position') or 0,
            format=data.get('format'),
            title=data.get('title') or None,
            tracks=[self._parse_track(track) for track in data.get('tracks') or []]
        )

    def _parse_track(self, data: Dict[str, Any]) -> Track:
        recording = data.get('recording') or {}

        length = None
        for source in [data, recording]:
            if source.get('length') is not None:
                length = int(source['length'])
                break

        return Track(
            position=int(data['position']),
            title=data.get('title') or recording.get('title', ''),
            length_ms=length,
            recording_artist_credits=self._parse_artist_credit(recording.get('artist-credit'))
        )
