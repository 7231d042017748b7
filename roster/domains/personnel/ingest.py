"""Ingest raw personnel lines from ``.sb`` source files."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from roster.domains.personnel.models import EmployeeRecord, ManagerRecord
from roster.domains.personnel.parser import ParseError, parse_record
from roster.utils.io import list_source_files, read_text_lines
from roster.utils.types import FilePath, SourceFileSummary

logger = logging.getLogger(__name__)

SOURCE_PATTERN = "*.sb"


@dataclass
class IngestResult:
    """Managers and employees kept apart, plus the shared error-line sink.

    Parse failures land in ``error_lines`` first; the aggregation pass
    appends unresolved employees to the same list afterwards.
    """

    managers: list[ManagerRecord] = field(default_factory=list)
    employees: list[EmployeeRecord] = field(default_factory=list)
    error_lines: list[str] = field(default_factory=list)
    sources: list[SourceFileSummary] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return len(self.managers) + len(self.employees)


def ingest_lines(lines: Iterable[str], result: IngestResult | None = None, source: str = "<lines>") -> IngestResult:
    """Parse every line into ``result``; each line yields a record or an error line."""
    result = result if result is not None else IngestResult()
    managers = employees = rejected = line_count = 0

    for line in lines:
        line_count += 1
        match parse_record(line):
            case ManagerRecord() as manager:
                result.managers.append(manager)
                managers += 1
            case EmployeeRecord() as employee:
                result.employees.append(employee)
                employees += 1
            case ParseError(reason=reason):
                logger.debug("Rejected line %d of %s (%s)", line_count, source, reason)
                result.error_lines.append(line.strip())
                rejected += 1

    result.sources.append(SourceFileSummary(source, line_count, managers, employees, rejected))
    return result


def ingest_personnel_files(directory: FilePath, pattern: str = SOURCE_PATTERN) -> IngestResult:
    """Load every source file in ``directory`` before any aggregation starts.

    Files are read in name order so repeated runs see managers and employees
    in the same sequence.
    """
    result = IngestResult()
    paths = list_source_files(directory, pattern)
    if not paths:
        logger.warning("No %s files found in %s", pattern, directory)

    for path in paths:
        logger.info("Reading personnel source: %s", path.name)
        ingest_lines(read_text_lines(path), result, source=path.name)

    logger.info(
        "Ingested %d managers, %d employees, %d rejected lines from %d file(s)",
        len(result.managers), len(result.employees), len(result.error_lines), len(paths),
    )
    return result
