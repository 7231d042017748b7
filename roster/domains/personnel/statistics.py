"""Per-department salary statistics: min, max and average of employee salaries."""

import logging

import pandas as pd

from roster.domains.personnel.models import DepartmentMap, Stat, stat_schema
from roster.utils.transforms import round_half_up
from roster.utils.validators import require_valid

logger = logging.getLogger(__name__)

STAT_COLUMNS = ["department", "min", "max", "average"]


def _salary_frame(departments: DepartmentMap) -> pd.DataFrame:
    rows = [
        {"department": name, "salary": salary}
        for name, dept in departments.items()
        for salary in dept.salaries()
    ]
    return pd.DataFrame(rows, columns=["department", "salary"]).astype({"salary": "float64"})


def summarize_salaries(departments: DepartmentMap) -> pd.DataFrame:
    """One row per department, sorted by name; empty departments get zeros.

    Manager salaries are not included. Values are unrounded.
    """
    names = pd.Index(sorted(departments), name="department", dtype=object)
    summary = (
        _salary_frame(departments)
        .groupby("department")["salary"]
        .agg(["min", "max", "mean"])
        .rename(columns={"mean": "average"})
        .reindex(names, fill_value=0.0)
        .reset_index()
    )
    return summary[STAT_COLUMNS]


def compute_statistics(departments: DepartmentMap) -> list[Stat]:
    """Salary statistics per department, each value rounded half-up to 2 places."""
    summary = require_valid(summarize_salaries(departments), stat_schema, "salary statistics")

    stats = [
        Stat(
            department=str(row.department),
            min=round_half_up(row.min, 2),
            max=round_half_up(row.max, 2),
            average=round_half_up(row.average, 2),
        )
        for row in summary.itertuples(index=False)
    ]
    # Sorted here; the order of the incoming map is not relied on.
    stats.sort(key=lambda stat: stat.department)
    logger.info("Computed salary statistics for %d department(s)", len(stats))
    return stats
