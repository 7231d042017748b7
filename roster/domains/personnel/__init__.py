"""Personnel domain pipeline.

Parses manager and employee records from ``.sb`` sources, groups them into
departments, writes one file per department plus an error log, and
computes salary statistics.
"""

import logging
from dataclasses import dataclass

from roster.config import RosterConfig
from roster.domains.personnel.aggregate import build_departments
from roster.domains.personnel.export import (
    clear_output_directory,
    write_departments,
    write_errors,
    write_statistics,
)
from roster.domains.personnel.ingest import ingest_personnel_files
from roster.domains.personnel.models import DepartmentMap, Stat
from roster.domains.personnel.statistics import compute_statistics
from roster.utils.types import RunStatus, SourceFileSummary, classify_run

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonnelRun:
    departments: DepartmentMap
    error_lines: tuple[str, ...]
    stats: tuple[Stat, ...]
    sources: tuple[SourceFileSummary, ...]
    status: RunStatus


def validate(config: RosterConfig) -> dict[str, str | int | list]:
    """Check that the input sources are readable and report what they hold."""
    try:
        ingested = ingest_personnel_files(config.input_dir, config.input_pattern)
        return {
            "status": "ok",
            "records": ingested.record_count,
            "rejected": len(ingested.error_lines),
            "sources": ingested.sources,
        }
    except FileNotFoundError as exc:
        return {"status": "error", "message": str(exc)}
    except (OSError, ValueError) as exc:
        return {"status": "error", "message": f"Unexpected: {exc}"}


def run(config: RosterConfig) -> PersonnelRun:
    """Execute the full personnel pipeline."""
    ingested = ingest_personnel_files(config.input_dir, config.input_pattern)
    error_lines = ingested.error_lines
    departments = build_departments(ingested.managers, ingested.employees, error_lines)

    output_dir = clear_output_directory(config.output_dir)
    write_departments(departments, output_dir, config.sort_field, config.sort_order)
    write_errors(error_lines, output_dir)

    stats = []
    if config.stat:
        stats = compute_statistics(departments)
        write_statistics(stats, config.output_mode, config.stat_path)

    status = classify_run(ingested.record_count, len(error_lines))
    logger.info("Personnel run finished: %s", status)
    return PersonnelRun(
        departments=departments,
        error_lines=tuple(error_lines),
        stats=tuple(stats),
        sources=tuple(ingested.sources),
        status=status,
    )
