"""
mbcuesheet - MusicBrainz cue sheet generator
Main entry point for the application.
"""

import sys
from pathlib import Path

try:
    _package = __package__
except NameError:
    _package = None

if not _package:
    _script_path = Path(__file__).resolve()
    src_path = _script_path.parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    from mbcuesheet.core import setup_logging
    from mbcuesheet.core.exceptions import ConfigurationError
    from mbcuesheet.core.validation import validate_and_raise
else:
    from .core import setup_logging
    from .core.exceptions import ConfigurationError
    from .core.validation import validate_and_raise

logger = setup_logging()


def load_cli():
    """
    Import the CLI class.

    The CLI pulls in requests and rich, so it is only imported once
    validate_and_raise has confirmed they are installed.
    """
    from mbcuesheet.ui.cli import CuesheetCLI
    return CuesheetCLI


def main(args=None):
    """Main entry point."""
    logger.debug("Starting mbcuesheet")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except ConfigurationError as e:
            logger.error(str(e))
            sys.exit(1)

        cli = load_cli()()
        cli.run(args)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        sys.exit(130)
    except Exception:
        logger.exception("Unhandled exception occurred")
        sys.exit(1)
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    main()
