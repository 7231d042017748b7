"""Personnel records, department aggregates and the salary statistics schema."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

import pandera as pa
from pandera import Check, Column

from roster.utils.transforms import format_fixed
from typing import TypeAlias

EmployeeID: TypeAlias = int
SalaryAmount: TypeAlias = float

STAT_HEADER = "department, min, max, mid"


def _check_person(id: int, name: str, salary: float) -> str:
    """Validate the shared personnel fields and return the trimmed name."""
    if isinstance(id, bool) or not isinstance(id, int):
        raise ValueError(f"id must be an integer, got {id!r}")
    if id < 0:
        raise ValueError(f"id cannot be negative: {id}")
    if not isinstance(salary, (int, float)) or isinstance(salary, bool):
        raise ValueError(f"salary must be a number, got {salary!r}")
    if not math.isfinite(salary) or salary <= 0:
        raise ValueError(f"salary must be positive: {salary}")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("name cannot be empty")
    return name.strip()


@dataclass(frozen=True)
class ManagerRecord:
    id: EmployeeID
    name: str
    salary: SalaryAmount
    department: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _check_person(self.id, self.name, self.salary))
        if not isinstance(self.department, str) or not self.department.strip():
            raise ValueError("department cannot be empty")
        object.__setattr__(self, "department", self.department.strip())

    def __str__(self) -> str:
        return serialize_record(self)


@dataclass(frozen=True)
class EmployeeRecord:
    id: EmployeeID
    name: str
    salary: SalaryAmount
    manager_id: EmployeeID

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _check_person(self.id, self.name, self.salary))
        if isinstance(self.manager_id, bool) or not isinstance(self.manager_id, int):
            raise ValueError(f"manager_id must be an integer, got {self.manager_id!r}")
        if self.manager_id < 0:
            raise ValueError(f"manager_id cannot be negative: {self.manager_id}")

    def __str__(self) -> str:
        return serialize_record(self)


PersonnelRecord: TypeAlias = ManagerRecord | EmployeeRecord


def serialize_record(record: PersonnelRecord) -> str:
    """Canonical line form; the salary is written with zero decimals, half-up."""
    salary = format_fixed(record.salary, 0)
    match record:
        case ManagerRecord(id=id, name=name, department=department):
            return f"Manager,{id},{name},{salary},{department}"
        case EmployeeRecord(id=id, name=name, manager_id=manager_id):
            return f"Employee,{id},{name},{salary},{manager_id}"
        case other:
            raise TypeError(f"Not a personnel record: {other!r}")


@dataclass(frozen=True)
class Department:
    """A finished department: one manager and the employees resolved to it."""

    name: str
    manager: ManagerRecord | None = None
    employees: tuple[EmployeeRecord, ...] = ()

    def has_valid_manager(self) -> bool:
        return self.manager is not None

    def salaries(self) -> list[SalaryAmount]:
        return [e.salary for e in self.employees]


@dataclass
class DepartmentDraft:
    """Mutable department used only while the aggregation pass is running."""

    name: str
    manager: ManagerRecord | None = None
    employees: list[EmployeeRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("department name cannot be None")
        self.name = self.name.strip()

    def set_manager(self, manager: ManagerRecord) -> None:
        if manager is None:
            raise ValueError("manager cannot be None")
        self.manager = manager

    def add_employee(self, employee: EmployeeRecord) -> None:
        if employee is None:
            raise ValueError("employee cannot be None")
        self.employees.append(employee)

    def has_valid_manager(self) -> bool:
        return self.manager is not None

    def freeze(self) -> Department:
        return Department(self.name, self.manager, tuple(self.employees))


DepartmentMap: TypeAlias = Mapping[str, Department]


@dataclass(frozen=True)
class Stat:
    department: str
    min: float
    max: float
    average: float

    def __post_init__(self) -> None:
        if self.department is None:
            raise ValueError("department cannot be None")
        if self.min < 0 or self.max < 0 or self.average < 0:
            raise ValueError(f"salary statistics cannot be negative: {self!r}")

    def to_line(self) -> str:
        return ",".join([
            self.department,
            format_fixed(self.min, 2),
            format_fixed(self.max, 2),
            format_fixed(self.average, 2),
        ])

    def __str__(self) -> str:
        return self.to_line()


stat_schema = pa.DataFrameSchema(
    {
        "department": Column(str, Check.str_length(min_value=1)),
        "min": Column(float, Check.greater_than_or_equal_to(0)),
        "max": Column(float, Check.greater_than_or_equal_to(0)),
        "average": Column(float, Check.greater_than_or_equal_to(0)),
    },
    strict=True,
    coerce=True,
)
