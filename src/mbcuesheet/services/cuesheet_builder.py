"""
Cue sheet builder: turns one medium into a cue sheet.
"""

from typing import Iterator, List, Tuple

from ..models.cuesheet import Cuesheet
from ..models.releases import Medium, Track
from ..core.config import ERROR_MESSAGES
from ..core.exceptions import MetadataError
from ..core.logger import get_logger
from ..utils.timecode import to_timecode
from .metadata_normalizer import join_artist_credits

logger = get_logger("services.cuesheet_builder")


class CuesheetBuilder:
    """Composes per-medium cue sheets from header lines and a track list."""

    @staticmethod
    def medium_identifier(medium: Medium) -> str:
        """Return the medium's display identifier, e.g. ``CD 01``."""
        return f"{medium.format or ''} {medium.position or 0:02d}"

    @staticmethod
    def title_line(release_title: str, medium: Medium, is_multi_disc: bool) -> str:
        title = release_title
        if is_multi_disc:
            title += f"- {CuesheetBuilder.medium_identifier(medium)}"
        if medium.title:
            title += f": {medium.title}"
        return f'TITLE "{title}"'

    @staticmethod
    def track_offsets(medium: Medium) -> Iterator[Tuple[Track, int]]:
        """
        Yield each track with its start offset in milliseconds.

        Offsets restart at zero for every medium. The last track's length is
        never needed; any other track without a length raises MetadataError.
        """
        start = 0
        last_index = len(medium.tracks) - 1
        for index, track in enumerate(medium.tracks):
            yield track, start
            if index == last_index:
                break
            if track.length_ms is None:
                raise MetadataError(ERROR_MESSAGES["MISSING_TRACK_LENGTH"].format(
                    position=track.position,
                    medium=CuesheetBuilder.medium_identifier(medium).strip()
                ))
            start += track.length_ms

    @staticmethod
    def track_lines(track: Track, start_ms: int) -> List[str]:
        lines = [
            f"  TRACK {track.position:02d} AUDIO",
            f'    TITLE "{track.title}"',
        ]
        if track.recording_artist_credits:
            lines.append(f'    PERFORMER "{join_artist_credits(track.recording_artist_credits)}"')
        lines.append(f"    INDEX 01 {to_timecode(start_ms)}")
        return lines

    def build(self, header_lines: List[str], medium: Medium, is_multi_disc: bool, release_title: str) -> Cuesheet:
        """
        Build the cue sheet for one medium.

        Args:
            header_lines: Release-level header, shared by every medium
            medium: Medium to render
            is_multi_disc: Whether the release has more than one medium
            release_title: Release title used for the TITLE line

        Returns:
            Cue sheet named after the medium identifier

        Raises:
            MetadataError: If a track other than the last has no length
        """
        lines = list(header_lines)
        lines.append(self.title_line(release_title, medium, is_multi_disc))

        for track, start_ms in self.track_offsets(medium):
            lines.extend(self.track_lines(track, start_ms))

        name = self.medium_identifier(medium)
        logger.debug(f"Built cue sheet {name!r} with {len(medium.tracks)} tracks")
        return Cuesheet(name=name, lines=lines)
