"""Command implementations behind the CLI."""

import argparse
import os
import sys

from loguru import logger
from tqdm import tqdm

from umlautpy.commands import UmlautSession
from umlautpy.core import Config, ConfigError
from umlautpy.editing import PromptConfirm, Span, load_abbrevs
from umlautpy.platforms import build_matches, generate_espanso_yaml
from umlautpy.utils.constants import Constants


def run_profiles(session: UmlautSession) -> None:
    """Print every profile with its forms, one column per letter."""
    alphabet = session.registry.alphabet or ()
    width = max((len(name) for name in session.registry.names()), default=0)

    if alphabet:
        logger.info("Positions: " + ", ".join(alphabet))
    for table in session.registry:
        print(f"{table.name:<{width}}  " + "  ".join(table.forms))


def _span_for(text: str, start: int | None, end: int | None) -> Span | None:
    if start is None and end is None:
        return None
    length = len(text)
    start = min(start or 0, length)
    end = length if end is None else min(end, length)
    return Span(start, max(start, end))


def _output_path(path: str, output_dir: str | None) -> str:
    if not output_dir:
        return path
    os.makedirs(output_dir, exist_ok=True)
    return os.path.join(output_dir, os.path.basename(path))


def run_convert(session: UmlautSession, config: Config, args: argparse.Namespace) -> int:
    """Convert files (or stdin) from ``args.source`` to ``args.target``.

    Returns:
        Total number of replacements
    """
    # Fail on unknown profiles before touching any file
    session.registry.lookup(args.source)
    session.registry.lookup(args.target)

    if not args.files:
        if config.confirm:
            raise ConfigError("--confirm needs file arguments (stdin is the input)")
        context = session.open_context("<stdin>", sys.stdin.read())
        count = session.substitute_profiles(
            args.source, args.target, _span_for(context.buffer.text, args.start, args.end)
        )
        sys.stdout.write(context.buffer.text)
        return count

    files = args.files
    if config.verbose and len(files) > 1:
        files = tqdm(files, desc="Converting", unit="file")

    confirm = PromptConfirm() if config.confirm else None
    if confirm is not None:
        session.transliterator.confirm = confirm

    total = 0
    for path in files:
        with open(path, "r", encoding="utf-8") as f:
            context = session.open_context(path, f.read())

        if confirm is not None:
            confirm.label = path

        count = session.substitute_profiles(
            args.source,
            args.target,
            _span_for(context.buffer.text, args.start, args.end),
            confirm=config.confirm,
        )
        total += count

        destination = _output_path(path, config.output)
        if count or destination != path:
            with open(destination, "w", encoding="utf-8") as f:
                f.write(context.buffer.text)
        logger.debug(f"{path}: {count} replacements -> {destination}")

        if confirm is not None and confirm.aborted:
            logger.warning(f"Conversion aborted in {path}; remaining files left unchanged")
            break

    if config.verbose:
        logger.info(f"Converted {len(args.files)} files, {total} replacements")
    return total


def run_espanso(session: UmlautSession, config: Config, args: argparse.Namespace) -> None:
    """Export the configured abbreviations encoded in ``args.profile``."""
    profile = session.registry.lookup(args.profile)
    raw = session.registry.lookup(Constants.RAW_PROFILE)
    abbrevs = load_abbrevs(config.abbrevs)

    if not len(abbrevs):
        logger.warning("No abbreviations to export (use --abbrevs or the 'abbrevs' config key)")

    matches = build_matches(abbrevs, raw, profile)
    generate_espanso_yaml(matches, config.output, config.verbose)


def run_command(config: Config, args: argparse.Namespace) -> None:
    """Build a session from config and run the selected command."""
    session = UmlautSession.from_config(config)

    if args.command == "profiles":
        run_profiles(session)
    elif args.command == "convert":
        run_convert(session, config, args)
    elif args.command == "espanso":
        run_espanso(session, config, args)
    else:
        raise ValueError(f"Unknown command: {args.command}")
