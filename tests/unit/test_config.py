"""Unit tests for configuration loading."""

import argparse
import json

import pytest

from umlautpy.core import Config, ConfigError, load_config
from umlautpy.utils.constants import Constants


class TestConfig:
    """Test Config model behavior."""

    def test_defaults(self) -> None:
        """A bare Config binds the raw profile globally to the default keys."""
        config = Config()
        assert (config.profile, config.scope, tuple(config.keys)) == (
            "raw",
            "global",
            Constants.DEFAULT_KEYS,
        )

    def test_keys_from_comma_string(self) -> None:
        """Keys given as one string are split on commas and stripped."""
        assert Config(keys="C-a, C-o ,C-u").keys == ["C-a", "C-o", "C-u"]

    def test_debug_implies_verbose(self) -> None:
        """Debug output turns on verbose output."""
        assert Config(debug=True).verbose is True

    def test_rejects_unknown_scope(self) -> None:
        """Scope must be global or local."""
        with pytest.raises(ValueError):
            Config(scope="buffer")


class TestLoadConfig:
    """Test load_config behavior."""

    def test_reads_json_file(self, tmp_path) -> None:
        """Values come from the JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"profile": "tex", "scope": "local"}))
        config = load_config(str(path))
        assert (config.profile, config.scope) == ("tex", "local")

    def test_cli_overrides_json(self, tmp_path) -> None:
        """CLI values that were given win over the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"profile": "tex", "output": "out"}))
        args = argparse.Namespace(profile="html", output=None, verbose=False)
        config = load_config(str(path), args)
        assert (config.profile, config.output) == ("html", "out")

    def test_unrelated_args_are_ignored(self) -> None:
        """Arguments that are not config fields do not reach the model."""
        args = argparse.Namespace(command="convert", source="tex", target="raw")
        assert load_config(None, args) == Config()

    def test_invalid_json_raises(self, tmp_path) -> None:
        """Broken JSON is reported as ConfigError."""
        path = tmp_path / "config.json"
        path.write_text("{profile")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_missing_file_raises(self, tmp_path) -> None:
        """An unreadable file is reported as ConfigError."""
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_value_raises(self, tmp_path) -> None:
        """Values failing validation are reported as ConfigError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"scope": "everywhere"}))
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_parser_reports_errors(self, tmp_path) -> None:
        """With a parser, errors exit through parser.error."""
        path = tmp_path / "config.json"
        path.write_text("[]")
        with pytest.raises(SystemExit):
            load_config(str(path), None, argparse.ArgumentParser())

    def test_extra_profiles_are_read(self, tmp_path) -> None:
        """Extra profiles from the file are kept as lists of forms."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"extra_profiles": {"upper": list("ABCDEFG")}}))
        assert load_config(str(path)).extra_profiles["upper"][6] == "G"
