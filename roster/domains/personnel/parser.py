"""Parse raw ``.sb`` lines into manager and employee records.

A line carries exactly five comma-separated fields::

    Manager,<id>,<name>,<salary>,<department>
    Employee,<id>,<name>,<salary>,<managerId>

``parse_record`` never raises. A rejected line comes back as a
``ParseError`` value so callers can route it to the error log with a
``match`` on the result.
"""

import logging
import math
import re
from dataclasses import dataclass

from roster.domains.personnel.models import EmployeeRecord, ManagerRecord, PersonnelRecord

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
FIELD_COUNT = 5
MAX_ID = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ParseError:
    line: str
    reason: str

    def __str__(self) -> str:
        return f"{self.reason}: {self.line!r}"


class _Rejected(ValueError):
    pass


def _parse_non_negative_int(raw: str, label: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise _Rejected(f"{label} is not an integer")
    value = int(raw)
    if value < 0:
        raise _Rejected(f"{label} is negative")
    if value > MAX_ID:
        raise _Rejected(f"{label} exceeds {MAX_ID}")
    return value


def _parse_salary(raw: str) -> float:
    if not raw:
        raise _Rejected("salary is empty")
    if not _DECIMAL.fullmatch(raw):
        raise _Rejected("salary is not a number")
    value = float(raw)
    if not math.isfinite(value):
        raise _Rejected("salary is not finite")
    if value <= 0:
        raise _Rejected("salary must be positive")
    return value


def _parse_fields(line: str) -> PersonnelRecord:
    parts = line.strip().split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise _Rejected(f"expected {FIELD_COUNT} fields, got {len(parts)}")

    role, raw_id, name, raw_salary, last = (part.strip() for part in parts)
    record_id = _parse_non_negative_int(raw_id, "id")
    if not name:
        raise _Rejected("name is empty")
    salary = _parse_salary(raw_salary)

    match role.lower():
        case "manager":
            if not last:
                raise _Rejected("department is empty")
            return ManagerRecord(record_id, name, salary, last)
        case "employee":
            manager_id = _parse_non_negative_int(last, "manager id")
            return EmployeeRecord(record_id, name, salary, manager_id)
        case _:
            raise _Rejected(f"unknown role {role!r}")


def parse_record(line: str) -> PersonnelRecord | ParseError:
    """Parse one line into a record, or describe why it was rejected."""
    try:
        return _parse_fields(line)
    except _Rejected as exc:
        return ParseError(line, str(exc))
    except Exception as exc:
        logger.debug("Unexpected failure parsing %r", line, exc_info=True)
        return ParseError(line, f"Unexpected: {exc}")


def looks_like_manager(line: str) -> bool:
    """Cheap pre-classification on the leading token only; not a validity check."""
    return line.lstrip().startswith("Manager")


def looks_like_employee(line: str) -> bool:
    return line.lstrip().startswith("Employee")
