"""Tests for salary statistics."""

from types import MappingProxyType

from roster.domains.personnel.aggregate import build_departments
from roster.domains.personnel.models import Department, EmployeeRecord, ManagerRecord, Stat
from roster.domains.personnel.statistics import compute_statistics, summarize_salaries


class TestComputeStatistics:

    def test_min_max_average(self, hr_manager, hr_employees):
        departments = build_departments([hr_manager], hr_employees, [])
        assert compute_statistics(departments) == [Stat("HR", 1000.0, 3000.0, 2000.0)]

    def test_manager_salary_excluded(self):
        m = ManagerRecord(1, "Boss", 1_000_000, "HR")
        departments = build_departments([m], [EmployeeRecord(2, "A", 500, 1)], [])
        assert compute_statistics(departments) == [Stat("HR", 500.0, 500.0, 500.0)]

    def test_empty_department_is_zero(self):
        departments = build_departments([ManagerRecord(1, "Jane", 5000, "Legal")], [], [])
        [stat] = compute_statistics(departments)
        assert (stat.min, stat.max, stat.average) == (0.0, 0.0, 0.0)
        assert stat.to_line() == "Legal,0.00,0.00,0.00"

    def test_exact_midpoint_rounds_up(self):
        m = ManagerRecord(1, "Jane", 5000, "HR")
        employees = [EmployeeRecord(2, "A", 0.125, 1), EmployeeRecord(3, "B", 0.125, 1)]
        [stat] = compute_statistics(build_departments([m], employees, []))
        assert stat.average == 0.13
        assert stat.to_line() == "HR,0.13,0.13,0.13"

    def test_binary_value_below_midpoint_rounds_down(self):
        m = ManagerRecord(1, "Jane", 5000, "HR")
        employees = [EmployeeRecord(2, "A", 2.675, 1), EmployeeRecord(3, "B", 1.005, 1)]
        [stat] = compute_statistics(build_departments([m], employees, []))
        assert (stat.min, stat.max) == (1.0, 2.67)
        assert stat.to_line().startswith("HR,1.00,2.67,")

    def test_each_value_rounded_independently(self):
        m = ManagerRecord(1, "Jane", 5000, "HR")
        employees = [EmployeeRecord(2, "A", 100.125, 1), EmployeeRecord(3, "B", 200.625, 1)]
        [stat] = compute_statistics(build_departments([m], employees, []))
        assert stat.to_line() == "HR,100.13,200.63,150.38"

    def test_sorted_by_name_regardless_of_map_order(self):
        departments = MappingProxyType({
            "b": Department("b", ManagerRecord(1, "X", 1, "b")),
            "B": Department("B", ManagerRecord(2, "Y", 1, "B")),
            "a": Department("a", ManagerRecord(3, "Z", 1, "a")),
        })
        assert [s.department for s in compute_statistics(departments)] == ["B", "a", "b"]

    def test_no_departments(self):
        assert compute_statistics(MappingProxyType({})) == []


class TestSummarizeSalaries:

    def test_columns_and_rows(self, hr_manager, hr_employees):
        departments = build_departments(
            [hr_manager, ManagerRecord(2, "Bob", 1, "IT")], hr_employees, [],
        )
        summary = summarize_salaries(departments)

        assert list(summary.columns) == ["department", "min", "max", "average"]
        assert summary["department"].tolist() == ["HR", "IT"]
        assert summary["average"].tolist() == [2000.0, 0.0]
