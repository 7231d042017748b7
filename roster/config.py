"""Roster configuration: project defaults, file overrides and option validation."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from roster.utils.io import load_toml_config
from roster.utils.types import FilePath, OutputMode, SortField, SortOrder
from typing import TypeAlias

logger = logging.getLogger(__name__)

ConfigValue: TypeAlias = str | int | bool | None
ConfigDict: TypeAlias = dict[str, ConfigValue]

OVERRIDE_FILE = Path("roster.yaml")

_KNOWN_KEYS = {"input_dir", "output_dir", "input_pattern", "sort", "order", "stat", "output", "path"}


class ConfigurationError(ValueError):
    """An invalid combination of run options; raised before any file is touched."""


@dataclass(frozen=True)
class RosterConfig:
    input_dir: Path = Path("input")
    output_dir: Path = Path("output")
    input_pattern: str = "*.sb"
    sort_field: SortField | None = None
    sort_order: SortOrder | None = None
    stat: bool = False
    output_mode: OutputMode = OutputMode.CONSOLE
    stat_path: Path | None = None


def get_env_config(pyproject: FilePath | None = None) -> ConfigDict:
    """Read roster defaults from the ``[tool.roster]`` table of pyproject.toml."""
    pyproject = Path(pyproject) if pyproject else Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject.exists():
        return {}
    data = load_toml_config(pyproject)
    return data.get("tool", {}).get("roster", {})


def load_override_file(path: FilePath) -> ConfigDict:
    """Load a YAML override file; a missing file contributes nothing."""
    path = Path(path)
    if not path.exists():
        return {}
    with open(path) as f:
        data = yaml.safe_load(f)

    match data:
        case None:
            return {}
        case {**values}:
            logger.info("Loaded configuration overrides from %s", path)
            return values
        case other:
            raise ConfigurationError(f"{path} must contain a mapping, got {type(other).__name__}")


def _merge(*layers: Mapping[str, ConfigValue]) -> ConfigDict:
    merged: ConfigDict = {}
    for layer in layers:
        merged.update({k: v for k, v in layer.items() if v is not None})
    return merged


def validate_options(values: Mapping[str, ConfigValue]) -> RosterConfig:
    """Turn merged option values into a ``RosterConfig`` or raise ``ConfigurationError``."""
    unknown = set(values) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown option(s): {', '.join(sorted(unknown))}")

    sort = values.get("sort")
    order = values.get("order")
    output = values.get("output", OutputMode.CONSOLE)
    path = values.get("path")

    if order is not None and sort is None:
        raise ConfigurationError("--order specified without --sort")
    if sort is not None and sort not in tuple(SortField):
        raise ConfigurationError(f"Invalid sort field: {sort}")
    if order is not None and order not in tuple(SortOrder):
        raise ConfigurationError(f"Invalid sort order: {order}")

    match output:
        case OutputMode.FILE if not path:
            raise ConfigurationError("--path is required with --output=file")
        case OutputMode.FILE | OutputMode.CONSOLE:
            pass
        case other:
            raise ConfigurationError(f"Unknown output type: {other}")

    stat = values.get("stat", False)
    if not isinstance(stat, bool):
        raise ConfigurationError(f"stat must be true or false, got {stat!r}")

    defaults = RosterConfig()
    return RosterConfig(
        input_dir=Path(values.get("input_dir", defaults.input_dir)),
        output_dir=Path(values.get("output_dir", defaults.output_dir)),
        input_pattern=str(values.get("input_pattern", defaults.input_pattern)),
        sort_field=SortField(sort) if sort is not None else None,
        sort_order=SortOrder(order) if order is not None else None,
        stat=stat,
        output_mode=OutputMode(output),
        stat_path=Path(path) if path else None,
    )


def load_roster_config(
    overrides: Mapping[str, ConfigValue] | None = None,
    config_file: FilePath | None = None,
    pyproject: FilePath | None = None,
) -> RosterConfig:
    """Layer pyproject defaults, the YAML override file and explicit overrides."""
    layers = [
        get_env_config(pyproject),
        load_override_file(config_file if config_file else OVERRIDE_FILE),
        overrides or {},
    ]
    return validate_options(_merge(*layers))
