"""Shared type definitions for the roster pipeline."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TypeAlias


FilePath: TypeAlias = str | Path


class SortField(StrEnum):
    NAME = "name"
    SALARY = "salary"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class OutputMode(StrEnum):
    CONSOLE = "console"
    FILE = "file"


class RunStatus(StrEnum):
    SUCCESS = "success"
    PARTIAL = "partial"
    EMPTY = "empty"


@dataclass(frozen=True)
class SourceFileSummary:
    """Per-file ingest accounting: every line is either a record or an error."""

    name: str
    line_count: int
    managers: int
    employees: int
    rejected: int

    @property
    def records(self) -> int:
        return self.managers + self.employees


def classify_run(record_count: int, error_count: int) -> RunStatus:
    match (record_count, error_count):
        case (0, _):
            return RunStatus.EMPTY
        case (_, 0):
            return RunStatus.SUCCESS
        case _:
            return RunStatus.PARTIAL
