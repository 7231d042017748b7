"""Write department files, the error log and salary statistics."""

import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from roster.domains.personnel.models import STAT_HEADER, DepartmentMap, EmployeeRecord, Stat
from roster.utils.io import remove_matching, write_lines
from roster.utils.types import FilePath, OutputMode, SortField, SortOrder

logger = logging.getLogger(__name__)

console = Console()

DEPARTMENT_SUFFIX = ".sb"
ERROR_LOG = "error.log"


def clear_output_directory(output_dir: FilePath) -> Path:
    """Create ``output_dir`` if needed and drop outputs of a previous run."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    removed = remove_matching(output_dir, [f"*{DEPARTMENT_SUFFIX}", ERROR_LOG])
    logger.info("Cleared %d previous output file(s) from %s", removed, output_dir)
    return output_dir


def sort_employees(
    employees: Sequence[EmployeeRecord],
    sort_field: SortField | str | None = None,
    sort_order: SortOrder | str | None = None,
) -> list[EmployeeRecord]:
    """Order employees for a department file; ties keep their input order."""
    descending = sort_order == SortOrder.DESC
    match sort_field:
        case None:
            return list(employees)
        case SortField.NAME:
            return sorted(employees, key=lambda e: e.name.lower(), reverse=descending)
        case SortField.SALARY:
            return sorted(employees, key=lambda e: e.salary, reverse=descending)
        case other:
            raise ValueError(f"Unsupported sort field: {other}")


def department_path(output_dir: FilePath, name: str) -> Path | None:
    """``<output_dir>/<name>.sb``, or None when the name would leave ``output_dir``."""
    output_dir = Path(output_dir)
    path = output_dir / f"{name}{DEPARTMENT_SUFFIX}"
    if path.resolve().parent != output_dir.resolve():
        return None
    return path


def write_departments(
    departments: DepartmentMap,
    output_dir: FilePath,
    sort_field: SortField | str | None = None,
    sort_order: SortOrder | str | None = None,
) -> list[Path]:
    """Write ``<department>.sb`` per managed department: manager line, then employees."""
    output_dir = Path(output_dir)
    written = []
    for dept in departments.values():
        if not dept.has_valid_manager():
            continue

        path = department_path(output_dir, dept.name)
        if path is None:
            logger.error("Skipping department %r: its file would land outside %s", dept.name, output_dir)
            continue

        lines = [str(dept.manager)]
        lines.extend(str(e) for e in sort_employees(dept.employees, sort_field, sort_order))
        try:
            write_lines(path, lines, make_parents=False)
        except OSError as exc:
            logger.error("Failed to write department file %s: %s", path, exc)
            continue
        written.append(path)

    logger.info("Wrote %d department file(s) to %s", len(written), output_dir)
    return written


def write_errors(error_lines: Sequence[str], output_dir: FilePath) -> Path | None:
    """Write ``error.log`` in discovery order; nothing is written when there are no errors."""
    if not error_lines:
        return None
    path = Path(output_dir) / ERROR_LOG
    try:
        write_lines(path, error_lines)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        return None
    logger.info("Logged %d rejected record(s) to %s", len(error_lines), path)
    return path


def render_statistics(stats: Sequence[Stat]) -> list[str]:
    return [STAT_HEADER, *(stat.to_line() for stat in stats)]


def write_statistics(
    stats: Sequence[Stat],
    mode: OutputMode | str = OutputMode.CONSOLE,
    path: FilePath | None = None,
) -> Path | None:
    lines = render_statistics(stats)
    match mode:
        case OutputMode.CONSOLE:
            for line in lines:
                console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
            return None
        case OutputMode.FILE:
            if not path:
                raise ValueError("A path is required to write statistics to a file")
            try:
                write_lines(path, lines)
            except OSError as exc:
                logger.error("Failed to write statistics to %s: %s", path, exc)
                return None
            return Path(path)
        case other:
            raise ValueError(f"Unsupported output mode: {other}")
