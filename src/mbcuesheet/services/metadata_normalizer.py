"""
Metadata normalizer for the release-level cue sheet header.

Each header field is an independent rule returning zero or more lines. The
rules run in a fixed order, so every field can be tested on its own.

Known limitation: MusicBrainz partial dates arrive with missing month/day
filled in as 01, so a date on January 1st is shown as the year only. A
release genuinely dated January 1st cannot be told apart from one whose
month and day are unknown.
"""

from datetime import date
from typing import Callable, List, Optional

from ..models.releases import ArtistCredit, ReleaseMetadata
from ..core.config import CUESHEET_CONFIG

HeaderRule = Callable[[ReleaseMetadata], List[str]]


def join_artist_credits(credits: List[ArtistCredit]) -> str:
    """Concatenate credited names, each followed by its join phrase."""
    return "".join(f"{credit.name}{credit.join_phrase or ''}" for credit in credits)


def format_release_date(release_date: date) -> str:
    """Render a release date as the year alone when it falls on day one of the year."""
    if release_date.timetuple().tm_yday == 1:
        return str(release_date.year)
    return release_date.isoformat()


def performer_lines(release: ReleaseMetadata) -> List[str]:
    if not release.artist_credits:
        return []
    return [f'PERFORMER "{join_artist_credits(release.artist_credits)}"']


def genre_lines(release: ReleaseMetadata) -> List[str]:
    if release.release_group is None or not release.release_group.genres:
        return []
    return [f"REM GENRE {'; '.join(release.release_group.genres)}"]


def date_lines(release: ReleaseMetadata) -> List[str]:
    if release.release_group is None or release.release_group.first_release_date is None:
        return []
    return [f"REM DATE {format_release_date(release.release_group.first_release_date)}"]


def label_lines(release: ReleaseMetadata) -> List[str]:
    lines = []
    seen = set()
    for label_info in release.label_infos:
        name: Optional[str] = label_info.name
        if not name or name in seen:
            continue
        seen.add(name)
        lines.append(f'REM COMMENT "{name}"')
    return lines


def album_id_lines(release: ReleaseMetadata) -> List[str]:
    return [f"REM MUSICBRAINZ_ALBUM_ID {release.id}"]


def file_lines(release: ReleaseMetadata) -> List[str]:
    return [f'FILE "{CUESHEET_CONFIG["AUDIO_FILE"]}" {CUESHEET_CONFIG["FILE_TYPE"]}']


HEADER_RULES: List[HeaderRule] = [
    performer_lines,
    genre_lines,
    date_lines,
    label_lines,
    album_id_lines,
    file_lines,
]


class MetadataNormalizer:
    """Builds the header lines shared by every medium of a release."""

    def __init__(self, rules: Optional[List[HeaderRule]] = None):
        self.rules = rules if rules is not None else HEADER_RULES

    def header_lines(self, release: ReleaseMetadata) -> List[str]:
        lines = []
        for rule in self.rules:
            lines.extend(rule(release))
        return lines
