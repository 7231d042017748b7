"""File I/O utilities for reading personnel sources and writing pipeline outputs."""

import logging
import tomllib
from collections.abc import Iterable
from pathlib import Path

from roster.utils.types import FilePath

logger = logging.getLogger(__name__)

SOURCE_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


def read_text_lines(path: FilePath) -> list[str]:
    """Read a text file into lines, handling encoding quirks of legacy exports."""
    path = Path(path)
    raw = path.read_bytes()
    for encoding in SOURCE_ENCODINGS:
        try:
            return raw.decode(encoding).splitlines()
        except UnicodeDecodeError:
            logger.debug("%s is not %s, trying next encoding", path.name, encoding)
            continue
    raise ValueError(f"Could not decode {path}")


def list_source_files(directory: FilePath, pattern: str) -> list[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Input directory missing: {directory}")
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def write_lines(path: FilePath, lines: Iterable[str], make_parents: bool = True) -> int:
    """Overwrite ``path`` with one line per item; returns the number written."""
    path = Path(path)
    if make_parents:
        path.parent.mkdir(parents=True, exist_ok=True)

    lines = list(lines)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line)
            f.write("\n")

    logger.info("Wrote %d lines to %s", len(lines), path)
    return len(lines)


def remove_matching(directory: FilePath, patterns: Iterable[str]) -> int:
    """Delete files in ``directory`` matching any glob pattern; subdirectories are left alone."""
    directory = Path(directory)
    removed = 0
    for pattern in patterns:
        for path in directory.glob(pattern):
            if path.is_file():
                path.unlink()
                removed += 1
    return removed


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)
