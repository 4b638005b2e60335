"""
Cover art fetching service: saves Cover Art Archive images next to the cue sheets.
"""

import re
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

from ..clients.cover_art_archive import CoverArtArchiveClient
from ..models.cover_art import CoverArtImage, CoverArtKind, CoverArtListing, CoverArtUrl
from ..core.config import COVER_ART_CONFIG, ERROR_MESSAGES
from ..core.exceptions import APIError, NetworkError
from ..core.logger import get_logger
from ..utils.path_utils import extension_from_content_type, extension_from_url, with_extension

logger = get_logger("services.cover_art")


class CoverArtFetcher:
    """
    Downloads cover art for a release.

    A single URL is saved as ``<out>/Cover.<ext>``. A listing is saved as one
    file per image inside ``<out>/Cover/``, named after the image's type tags.
    Failures are logged and skipped; they never abort the run.
    """

    def __init__(self, client: Optional[CoverArtArchiveClient] = None, download_delay: Optional[float] = None):
        self.client = client or CoverArtArchiveClient()
        self.download_delay = COVER_ART_CONFIG["DOWNLOAD_DELAY"] if download_delay is None else download_delay
        self._handlers: Dict[CoverArtKind, Callable[..., List[Path]]] = {
            CoverArtKind.URL: self._save_single,
            CoverArtKind.LISTING: self._save_listing,
        }

    def fetch_and_save(self, release_mbid: str, out_dir: Path, front_only: bool = False) -> List[Path]:
        """
        Fetch cover art for a release and save it under out_dir.

        Args:
            release_mbid: MusicBrainz release ID
            out_dir: Output directory shared with the cue sheets
            front_only: Save only the front cover

        Returns:
            Paths of the images written (empty when nothing could be fetched)
        """
        cover_path = Path(out_dir) / COVER_ART_CONFIG["DIR_NAME"]
        try:
            response = self.client.get_cover_art(release_mbid, front_only=front_only)
        except (APIError, NetworkError) as e:
            logger.error(f"{ERROR_MESSAGES['COVER_ART_FAILED']}: {e}")
            return []

        return self._handlers[response.kind](response, cover_path)

    def _save_single(self, response: CoverArtUrl, cover_path: Path) -> List[Path]:
        path = self.download_image(response.url, cover_path)
        return [path] if path else []

    def _save_listing(self, response: CoverArtListing, cover_path: Path) -> List[Path]:
        cover_path.mkdir(parents=True, exist_ok=True)

        written = []
        used_stems: Set[str] = set()
        for index, image in enumerate(response.images):
            if index:
                # Courtesy pause between downloads
                time.sleep(self.download_delay)
            stem = self._unique_stem(self.image_stem(image), used_stems)
            path = self.download_image(image.image, cover_path / stem)
            if path:
                written.append(path)

        logger.info(f"Saved {len(written)} of {len(response.images)} cover art images")
        return written

    @staticmethod
    def image_stem(image: CoverArtImage) -> str:
        """Build a file stem from an image's type tags, e.g. ``Front`` or ``Booklet_Medium``."""
        tags = [re.sub(r'[^0-9A-Za-z]+', '', tag) for tag in image.types]
        stem = "_".join(tag for tag in tags if tag)
        return stem or image.id or "image"

    @staticmethod
    def _unique_stem(stem: str, used_stems: Set[str]) -> str:
        candidate = stem
        counter = 2
        while candidate in used_stems:
            candidate = f"{stem}_{counter}"
            counter += 1
        used_stems.add(candidate)
        return candidate

    def download_image(self, url: str, stem_path: Path) -> Optional[Path]:
        """
        Download one image to stem_path plus the extension of the resolved URL.

        Returns:
            The written path, or None when the download failed
        """
        try:
            response = self.client.download(url)
        except NetworkError as e:
            logger.error(f"Failed to download {url}: {e}")
            return None

        if not response.ok:
            logger.error(f"HTTP error code {response.status_code} for {url}")
            return None

        extension = extension_from_url(response.url) or extension_from_content_type(
            response.headers.get('Content-Type')
        )
        if not extension:
            logger.warning(f"Could not determine file type of {response.url}; saving without extension")

        path = with_extension(stem_path, extension)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.content)
        logger.info(f"Saved cover art {path}")
        return path
