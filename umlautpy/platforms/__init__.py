"""Export formats for text expanders."""

from .espanso import (
    abbrev_to_match_dict,
    build_matches,
    determine_output_path,
    generate_espanso_yaml,
)

__all__ = [
    "abbrev_to_match_dict",
    "build_matches",
    "determine_output_path",
    "generate_espanso_yaml",
]
