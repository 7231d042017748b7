"""Shared fixtures for the roster test suite."""

import pytest

from roster.domains.personnel.models import EmployeeRecord, ManagerRecord


SAMPLE_LINES = [
    "Manager,1,Jane Smith,5000,HR",
    "Employee,101,John Doe,3000,1",
    "Employee,102,Bad Guy,abc,1",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def hr_manager():
    return ManagerRecord(1, "Jane Smith", 5000, "HR")


@pytest.fixture
def hr_employees():
    return [
        EmployeeRecord(101, "A", 1000, 1),
        EmployeeRecord(102, "B", 2000, 1),
        EmployeeRecord(103, "C", 3000, 1),
    ]


@pytest.fixture
def write_sources(tmp_path):
    """Create an input directory holding the given ``{filename: lines}`` sources."""

    def _write(sources: dict[str, list[str]]):
        input_dir = tmp_path / "input"
        input_dir.mkdir(exist_ok=True)
        for name, lines in sources.items():
            (input_dir / name).write_text("\n".join(lines) + "\n", encoding="utf-8")
        return input_dir

    return _write
