"""
mbcuesheet CLI Module
Command-line interface for generating cue sheets from a MusicBrainz release.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..clients.musicbrainz import MusicBrainzClient
from ..clients.cover_art_archive import CoverArtArchiveClient
from ..clients.session import create_session
from ..services.cuesheet_service import CuesheetService
from ..services.cover_art_fetcher import CoverArtFetcher
from ..core.config import PROJECT_NAME, PROJECT_VERSION, PROJECT_DESCRIPTION
from ..core.exceptions import CuesheetError
from ..core.logger import get_logger, setup_logging
from ..core.validation import validate_release_id

logger = get_logger("ui.cli")


class CuesheetCLI:
    """Main CLI class for mbcuesheet."""

    def __init__(
        self,
        musicbrainz_client: Optional[MusicBrainzClient] = None,
        cuesheet_service: Optional[CuesheetService] = None,
        cover_art_fetcher: Optional[CoverArtFetcher] = None,
    ):
        """Initialize the CLI; both remote clients share one HTTP session."""
        session = create_session()
        self.musicbrainz_client = musicbrainz_client or MusicBrainzClient(session)
        self.cuesheet_service = cuesheet_service or CuesheetService()
        self.cover_art_fetcher = cover_art_fetcher or CoverArtFetcher(CoverArtArchiveClient(session))
        self.console = Console()
        self.error_console = Console(stderr=True)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_DESCRIPTION} (v{PROJECT_VERSION})",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s -r 76df3287-6cda-33eb-8e9a-044b5e15ffdd -o ./out
  %(prog)s -r 76df3287-6cda-33eb-8e9a-044b5e15ffdd -o ./out --cover-art
  %(prog)s -r 76df3287-6cda-33eb-8e9a-044b5e15ffdd -o ./out --front-only
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--release-id', '-r',
            required=True,
            help='MusicBrainz release ID'
        )
        parser.add_argument(
            '--out-dir', '-o',
            required=True,
            type=Path,
            help='Directory to write cue sheets (and cover art) to'
        )
        parser.add_argument(
            '--cover-art', '-c',
            action='store_true',
            help='Also download every cover art image of the release'
        )
        parser.add_argument(
            '--front-only',
            action='store_true',
            help='Download only the front cover (implies --cover-art)'
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Show debug logging'
        )

        return parser

    def run(self, args: List[str] = None):
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.verbose:
            setup_logging(level="DEBUG")

        try:
            release_id = validate_release_id(parsed_args.release_id)
        except ValueError as e:
            parser.error(str(e))

        try:
            self.generate(release_id, parsed_args.out_dir)
            if parsed_args.cover_art or parsed_args.front_only:
                self.fetch_cover_art(release_id, parsed_args.out_dir, parsed_args.front_only)
        except KeyboardInterrupt:
            self.error_console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            sys.exit(130)
        except (CuesheetError, OSError) as e:
            logger.debug("Fatal error", exc_info=True)
            self.error_console.print(f"[bold red]✗[/bold red] {e}")
            sys.exit(1)

        sys.exit(0)

    def generate(self, release_id: str, out_dir: Path) -> List[Path]:
        """Fetch the release and write its cue sheets."""
        self.console.print(f"[dim]Fetching release {release_id} from MusicBrainz...[/dim]")
        release = self.musicbrainz_client.get_release(release_id)

        paths = self.cuesheet_service.generate_and_write(release, out_dir)
        for path in paths:
            self.console.print(f"[green]✓[/green] Cue sheet: {path}")
        return paths

    def fetch_cover_art(self, release_id: str, out_dir: Path, front_only: bool = False) -> List[Path]:
        """Download cover art; failures are reported but never fatal."""
        self.console.print("[dim]Fetching cover art from the Cover Art Archive...[/dim]")
        paths = self.cover_art_fetcher.fetch_and_save(release_id, out_dir, front_only=front_only)
        for path in paths:
            self.console.print(f"[green]✓[/green] Cover art: {path}")
        if not paths:
            self.error_console.print("[yellow]⚠[/yellow] No cover art saved.")
        return paths
