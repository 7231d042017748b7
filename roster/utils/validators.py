"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema
from typing import TypeAlias

ValidationResult: TypeAlias = dict[str, str | bool | list[str]]


class SchemaViolation(ValueError):
    def __init__(self, label: str, errors: list[str]):
        super().__init__(f"{label} failed validation: {'; '.join(errors)}")
        self.errors = errors


def _describe_failures(failure_cases: pd.DataFrame) -> list[str]:
    errors = []
    for _, row in failure_cases.iterrows():
        match row.to_dict():
            case {"column": col, "check": check, "failure_case": val}:
                errors.append(f"Column '{col}' failed check '{check}': {val}")
            case failure:
                errors.append(f"Validation failure: {failure}")
    return errors


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema, collecting every failure."""
    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as e:
        return {"valid": False, "status": "error", "errors": _describe_failures(e.failure_cases)}
    return {"valid": True, "status": "ok", "errors": []}


def require_valid(df: pd.DataFrame, schema: DataFrameSchema, label: str) -> pd.DataFrame:
    match validate_dataframe(df, schema):
        case {"valid": True}:
            return df
        case {"errors": errors}:
            raise SchemaViolation(label, errors)
