"""Espanso match file export for abbreviation tables."""

import os
import sys

import yaml
from loguru import logger

from umlautpy.core import EncodingTable
from umlautpy.editing import AbbrevTable
from umlautpy.transliteration import transliterate_text
from umlautpy.utils.constants import Constants


def abbrev_to_match_dict(trigger: str, replace: str) -> dict:
    """Convert one abbreviation to an Espanso match dict."""
    return {"trigger": trigger, "replace": replace, "word": True}


def build_matches(abbrevs: AbbrevTable, raw: EncodingTable, profile: EncodingTable) -> list[dict]:
    """Re-encode every expansion from ``raw`` into ``profile``.

    Matches are sorted by trigger so the output is stable.
    """
    return [
        abbrev_to_match_dict(trigger, transliterate_text(raw, profile, expansion))
        for trigger, expansion in sorted(abbrevs.items())
    ]


def determine_output_path(output_path: str | None) -> str | None:
    """Determine final output file path."""
    if not output_path:
        return None

    if os.path.isdir(output_path) or not output_path.endswith((".yml", ".yaml")):
        return os.path.join(output_path, Constants.ESPANSO_OUTPUT_FILE)
    return output_path


def generate_espanso_yaml(matches: list[dict], output_path: str | None, verbose: bool = False) -> None:
    """Write matches as an Espanso YAML file, or to stdout without a path."""
    content = yaml.safe_dump(
        {"matches": matches},
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )

    output_file = determine_output_path(output_path)
    if output_file:
        os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(content)
        if verbose:
            logger.info(f"Wrote {len(matches)} matches to {output_file}")
    else:
        sys.stdout.write(content)
