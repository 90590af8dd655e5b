"""Command-line interface."""

import argparse

from umlautpy.core.profiles import BUILTIN_PROFILES


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output (implies --verbose)")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    profiles = ", ".join(BUILTIN_PROFILES)
    parser = argparse.ArgumentParser(
        prog="umlautpy",
        description="Convert German umlauts between raw, ASCII, TeX, HTML and other encodings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Built-in profiles: {profiles}

Examples:
  # List profiles and their forms
  %(prog)s profiles

  # Convert TeX escapes in a file to raw umlauts, in place
  %(prog)s convert tex raw chapter.tex

  # Convert only the first 200 characters, asking before each change
  %(prog)s convert raw html page.html --end 200 --confirm

  # Pipe through stdin/stdout
  echo "Gr\\"u\\ss{{}}e" | %(prog)s convert tex raw

  # Export abbreviations as an Espanso match file using HTML entities
  %(prog)s espanso html --abbrevs abbrevs.yml -o ~/.config/espanso/match/

Example config.json:
{{
  "profile": "tex",
  "keys": "M-A,M-O,M-U,M-a,M-o,M-u,M-s",
  "extra_profiles": {{"rtf": ["\\\\'c4", "\\\\'d6", "\\\\'dc", "\\\\'e4", "\\\\'f6", "\\\\'fc", "\\\\'df"]}},
  "abbrevs": "~/abbrevs.yml",
  "verbose": true
}}
        """,
    )
    _add_common_arguments(parser)
    parser.add_argument("--keys", type=str, help="Comma separated logical keys, one per letter")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("profiles", help="List registered profiles")

    convert_parser = subparsers.add_parser("convert", help="Convert text between profiles")
    convert_parser.add_argument("source", help="Profile the text is in")
    convert_parser.add_argument("target", help="Profile to convert to")
    convert_parser.add_argument("files", nargs="*", help="Files to convert (stdin when omitted)")
    convert_parser.add_argument("--start", type=int, help="Start offset of the span to convert")
    convert_parser.add_argument("--end", type=int, help="End offset (exclusive) of the span")
    convert_parser.add_argument(
        "--confirm", action="store_true", help="Ask before each replacement"
    )
    convert_parser.add_argument(
        "-o", "--output", type=str, help="Directory for converted files (default: in place)"
    )

    espanso_parser = subparsers.add_parser(
        "espanso", help="Export abbreviations as an Espanso match file"
    )
    espanso_parser.add_argument("profile", help="Profile to encode expansions in")
    espanso_parser.add_argument("--abbrevs", type=str, help="YAML file of abbrev: expansion")
    espanso_parser.add_argument("-o", "--output", type=str, help="Output file or directory")

    return parser
