"""
Cue sheet service: generates every medium's cue sheet and writes them out.
"""

from pathlib import Path
from typing import List

from ..models.cuesheet import Cuesheet
from ..models.releases import ReleaseMetadata
from ..core.config import CUESHEET_CONFIG
from ..core.logger import get_logger
from ..utils.path_utils import sanitize_filename
from .cuesheet_builder import CuesheetBuilder
from .metadata_normalizer import MetadataNormalizer

logger = get_logger("services.cuesheet")


class CuesheetService:
    """Service for generating and saving cue sheets for a release."""

    def __init__(self, normalizer: MetadataNormalizer = None, builder: CuesheetBuilder = None):
        self.normalizer = normalizer or MetadataNormalizer()
        self.builder = builder or CuesheetBuilder()

    def generate(self, release: ReleaseMetadata) -> List[Cuesheet]:
        """
        Generate one cue sheet per medium.

        Everything is built in memory first, so a MetadataError on any
        medium means no cue sheet is produced at all.
        """
        header = self.normalizer.header_lines(release)
        if not release.media:
            logger.warning(f"Release {release.id} has no media; no cue sheets generated")
        return [
            self.builder.build(header, medium, release.is_multi_disc, release.title)
            for medium in release.media
        ]

    def write(self, cuesheets: List[Cuesheet], out_dir: Path) -> List[Path]:
        """
        Write cue sheets into out_dir, creating it if needed.

        Filesystem errors propagate to the caller.
        """
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for cuesheet in cuesheets:
            path = out_dir / sanitize_filename(cuesheet.filename)
            # newline='' keeps LF line endings on every platform
            with open(path, 'w', encoding=CUESHEET_CONFIG["ENCODING"], newline='') as f:
                f.write(cuesheet.text)
            logger.info(f"Wrote {path}")
            written.append(path)
        return written

    def generate_and_write(self, release: ReleaseMetadata, out_dir: Path) -> List[Path]:
        return self.write(self.generate(release), out_dir)
