"""Group managers and employees into department aggregates."""

import logging
from collections.abc import MutableSequence, Sequence
from types import MappingProxyType

from roster.domains.personnel.models import (
    Department,
    DepartmentDraft,
    DepartmentMap,
    EmployeeRecord,
    EmployeeID,
    ManagerRecord,
)

logger = logging.getLogger(__name__)


def _index_managers(
    managers: Sequence[ManagerRecord],
    drafts: dict[str, DepartmentDraft],
) -> dict[EmployeeID, ManagerRecord]:
    """First pass: index managers by id and give each named department its manager.

    A repeated id, or a second manager for the same department, silently
    replaces the earlier one.
    """
    manager_by_id: dict[EmployeeID, ManagerRecord] = {}
    for manager in managers:
        if manager.id in manager_by_id:
            logger.debug("Manager id %d seen again, keeping the later record", manager.id)
        manager_by_id[manager.id] = manager

        draft = drafts.get(manager.department)
        if draft is None:
            draft = drafts[manager.department] = DepartmentDraft(manager.department)
        elif draft.has_valid_manager():
            logger.debug("Department %r manager replaced by %s", draft.name, manager.name)
        draft.set_manager(manager)
    return manager_by_id


def _resolve_employees(
    employees: Sequence[EmployeeRecord],
    manager_by_id: dict[EmployeeID, ManagerRecord],
    drafts: dict[str, DepartmentDraft],
    error_sink: MutableSequence[str],
) -> int:
    """Second pass: attach each employee to its manager's department."""
    unresolved = 0
    for employee in employees:
        manager = manager_by_id.get(employee.manager_id)
        draft = drafts.get(manager.department) if manager is not None else None
        if draft is None:
            logger.debug("Unresolved manager id %d for employee %d", employee.manager_id, employee.id)
            error_sink.append(str(employee))
            unresolved += 1
            continue
        draft.add_employee(employee)
    return unresolved


def build_departments(
    managers: Sequence[ManagerRecord],
    employees: Sequence[EmployeeRecord],
    error_sink: MutableSequence[str],
) -> DepartmentMap:
    """Build the department map, name-ordered and read-only.

    Every manager is indexed before any employee is resolved. Departments
    come only from managers; employees whose manager id is unknown are
    written to ``error_sink`` in their canonical form and left out.
    """
    drafts: dict[str, DepartmentDraft] = {}
    manager_by_id = _index_managers(managers, drafts)
    unresolved = _resolve_employees(employees, manager_by_id, drafts, error_sink)

    departments: dict[str, Department] = {
        name: drafts[name].freeze() for name in sorted(drafts)
    }
    logger.info(
        "Built %d department(s); %d employee(s) unresolved",
        len(departments), unresolved,
    )
    return MappingProxyType(departments)
