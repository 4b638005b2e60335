"""
Cover Art Archive Client Module

API Documentation: https://musicbrainz.org/doc/Cover_Art_Archive/API

- /release/{mbid}        JSON listing of all images for a release
- /release/{mbid}/front  redirect to the front cover image
"""

from typing import Any, Dict, Optional, Union

import requests

from ..models.cover_art import CoverArtImage, CoverArtListing, CoverArtUrl
from ..core.config import COVER_ART_CONFIG
from ..core.exceptions import APIError, NetworkError
from ..core.logger import get_logger
from .session import create_session

logger = get_logger("clients.cover_art_archive")

REDIRECT_STATUS_CODES = {301, 302, 303, 307, 308}


class CoverArtArchiveClient:
    """Client for the Cover Art Archive."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.base_url = COVER_ART_CONFIG["BASE_URL"]
        self.timeout = COVER_ART_CONFIG["TIMEOUT"]
        self.session = session or create_session(COVER_ART_CONFIG["USER_AGENT"])

    def _get(self, url: str, **kwargs) -> requests.Response:
        logger.debug(f"GET {url}")
        try:
            return self.session.get(url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

    def get_cover_art(self, release_mbid: str, front_only: bool = False) -> Union[CoverArtUrl, CoverArtListing]:
        """
        Look up cover art for a release.

        Args:
            release_mbid: MusicBrainz release ID
            front_only: Ask for the front cover URL instead of the full listing

        Returns:
            CoverArtUrl when front_only is set, otherwise CoverArtListing

        Raises:
            APIError: If the archive has no art or answers with an error
            NetworkError: If the archive cannot be reached
        """
        if front_only:
            return self._get_front_url(release_mbid)

        response = self._get(f"{self.base_url}/release/{release_mbid}")
        if response.status_code == 404:
            raise APIError(f"No cover art found for release {release_mbid}", 404)
        if not response.ok:
            raise APIError(f"Cover Art Archive returned HTTP {response.status_code}", response.status_code)

        try:
            return self._parse_listing(response.json())
        except (KeyError, TypeError, ValueError) as e:
            raise APIError(f"Malformed Cover Art Archive listing: {e!r}", response.status_code) from e

    def _get_front_url(self, release_mbid: str) -> CoverArtUrl:
        url = f"{self.base_url}/release/{release_mbid}/front"
        response = self._get(url, allow_redirects=False)

        if response.status_code in REDIRECT_STATUS_CODES and response.headers.get('Location'):
            return CoverArtUrl(url=response.headers['Location'])
        if response.status_code == 404:
            raise APIError(f"No front cover found for release {release_mbid}", 404)
        if response.ok:
            return CoverArtUrl(url=url)
        raise APIError(f"Cover Art Archive returned HTTP {response.status_code}", response.status_code)

    def _parse_listing(self, data: Dict[str, Any]) -> CoverArtListing:
        images = []
        for image in data.get('images') or []:
            images.append(CoverArtImage(
                image=image['image'],
                types=list(image.get('types') or []),
                id=str(image['id']) if image.get('id') is not None else None,
                front=bool(image.get('front')),
                back=bool(image.get('back'))
            ))
        return CoverArtListing(images=images, release=data.get('release'))

    def download(self, url: str) -> requests.Response:
        """
        Download an image, following redirects.

        The caller checks the status; only connection failures raise.
        """
        return self._get(url, headers={'Accept': '*/*'})
