"""Configuration model and loading."""

import argparse
import json
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from umlautpy.core.exceptions import ConfigError
from umlautpy.utils.constants import Constants
from umlautpy.utils.helpers import expand_file_path, parse_key_list


class Config(BaseModel):
    """Runtime configuration.

    Values come from an optional JSON file; CLI arguments override them.
    """

    profile: str = Constants.DEFAULT_PROFILE
    keys: list[str] = Field(default_factory=lambda: list(Constants.DEFAULT_KEYS))
    scope: Literal["global", "local"] = "global"
    extra_profiles: dict[str, list[str]] = Field(default_factory=dict)
    abbrevs: str | None = None
    output: str | None = None
    confirm: bool = False
    verbose: bool = False
    debug: bool = False

    @field_validator("keys", mode="before")
    @classmethod
    def parse_keys(cls, value):
        """Accept keys as a comma separated string or a list."""
        return list(parse_key_list(value))

    @field_validator("abbrevs", "output", mode="after")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        """Expand ~ in path options."""
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Debug output needs the verbose sink as well."""
        if self.debug:
            self.verbose = True
        return self


def _read_json_config(config_path: str) -> dict:
    path = expand_file_path(config_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Load configuration from JSON and merge CLI overrides.

    Only CLI values that were actually given (not None) override the file.

    Args:
        config_path: Path to a JSON config file, or None
        args: Parsed CLI arguments
        parser: Parser used to report errors; without it errors raise

    Returns:
        Validated Config

    Raises:
        ConfigError: If the file or values are invalid and no parser is given
    """
    try:
        values = _read_json_config(config_path) if config_path else {}

        if args is not None:
            for name in Config.model_fields:
                value = getattr(args, name, None)
                # store_true flags only override when set
                if value is None or value is False:
                    continue
                values[name] = value

        return Config(**values)
    except ValidationError as e:
        error = ConfigError(f"Invalid configuration: {e}")
    except ConfigError as e:
        error = e

    if parser is not None:
        parser.error(str(error))
    raise error
