"""Tests for option layering and validation."""

from pathlib import Path

import pytest

from roster.config import (
    ConfigurationError,
    RosterConfig,
    get_env_config,
    load_override_file,
    load_roster_config,
    validate_options,
)
from roster.utils.types import OutputMode, SortField, SortOrder


class TestValidateOptions:

    def test_defaults(self):
        assert validate_options({}) == RosterConfig()

    def test_full(self):
        config = validate_options({
            "sort": "salary", "order": "desc", "stat": True,
            "output": "file", "path": "stats.txt", "input_dir": "in",
        })
        assert config.sort_field is SortField.SALARY
        assert config.sort_order is SortOrder.DESC
        assert config.output_mode is OutputMode.FILE
        assert config.stat_path == Path("stats.txt")
        assert config.input_dir == Path("in")

    @pytest.mark.parametrize("values, message", [
        ({"order": "asc"}, "without --sort"),
        ({"sort": "age"}, "Invalid sort field"),
        ({"sort": "name", "order": "up"}, "Invalid sort order"),
        ({"output": "file"}, "--path is required"),
        ({"output": "printer"}, "Unknown output type"),
        ({"stat": "yes"}, "stat must be"),
        ({"colour": "red"}, "Unknown option"),
    ])
    def test_invalid(self, values, message):
        with pytest.raises(ConfigurationError, match=message):
            validate_options(values)


class TestConfigLayers:

    def test_pyproject_table(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.roster]\ninput_dir = "data/in"\n')
        assert get_env_config(pyproject) == {"input_dir": "data/in"}

    def test_missing_pyproject(self, tmp_path):
        assert get_env_config(tmp_path / "pyproject.toml") == {}

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "roster.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            load_override_file(path)

    def test_later_layers_win_and_none_is_ignored(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.roster]\ninput_dir = "from_pyproject"\noutput_dir = "out"\n')
        override = tmp_path / "roster.yaml"
        override.write_text("input_dir: from_yaml\nsort: name\nstat: true\n")

        config = load_roster_config(
            {"input_dir": None, "order": "desc", "stat": None},
            config_file=override,
            pyproject=pyproject,
        )

        assert config.input_dir == Path("from_yaml")
        assert config.output_dir == Path("out")
        assert config.sort_field is SortField.NAME
        assert config.sort_order is SortOrder.DESC
        assert config.stat is True
