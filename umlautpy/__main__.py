"""Main entry point for umlautpy package."""

import sys

from loguru import logger

from umlautpy.cli import create_parser
from umlautpy.core import UmlautError, load_config
from umlautpy.processing import run_command
from umlautpy.utils.constants import Constants
from umlautpy.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * Constants.BANNER_WIDTH)
        logger.info("UmlautPy - Umlaut Encoding Converter")
        logger.info("=" * Constants.BANNER_WIDTH)
        logger.info("")


def _validate_args(args, parser) -> None:
    """Validate argument combinations argparse cannot express."""
    start = getattr(args, "start", None)
    end = getattr(args, "end", None)
    if start is not None and start < 0:
        parser.error("--start must not be negative")
    if end is not None and end < 0:
        parser.error("--end must not be negative")
    if start is not None and end is not None and end < start:
        parser.error("--end must not be smaller than --start")


def _print_config_summary(config, command: str) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Command: {command}")
        logger.info(f"  Profile: {config.profile} ({config.scope})")
        logger.info(f"  Keys: {', '.join(config.keys)}")
        if config.extra_profiles:
            logger.info(f"  Extra profiles: {', '.join(config.extra_profiles)}")
        if config.abbrevs:
            logger.info(f"  Abbreviations: {config.abbrevs}")
        if config.output:
            logger.info(f"  Output: {config.output}")
        logger.info("")


def _run_with_error_handling(config, args) -> None:
    """Run the command with proper error handling."""
    try:
        run_command(config, args)
        if config.verbose:
            logger.info("")
            logger.info("✓ Done")
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        raise
    except UmlautError as e:
        logger.error(f"✗ {e}")
        sys.exit(1)
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * Constants.BANNER_WIDTH)
            logger.error("✗ Processing failed")
            logger.error("=" * Constants.BANNER_WIDTH)
        raise


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _validate_args(args, parser)
    _print_config_summary(config, args.command)

    _run_with_error_handling(config, args)


if __name__ == "__main__":
    main()
