from __future__ import annotations

import pandas as pd

from covid_browser.validation.errors import ValidationIssue, ValidationError

REQUIRED_COLUMNS = ("county", "date", "cases")


def validate_frame(frame: pd.DataFrame) -> None:
    """
    Check a long-format table before it becomes a Dataset.

    Collects every problem instead of stopping at the first one, and raises a
    single ValidationError listing them all.
    """
    issues: list[ValidationIssue] = []

    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        issues.append(
            ValidationIssue("FRAME_MISSING_COLUMNS", f"Missing required column(s): {', '.join(missing)}.")
        )
        raise ValidationError(issues)

    for col in REQUIRED_COLUMNS:
        n_null = int(frame[col].isna().sum())
        if n_null:
            issues.append(ValidationIssue("FRAME_NULLS", f"Column '{col}' has {n_null} null value(s)."))

    cases = pd.to_numeric(frame["cases"], errors="coerce")
    if cases.isna().sum() > frame["cases"].isna().sum():
        issues.append(ValidationIssue("FRAME_CASES_TYPE", "Column 'cases' has non-numeric values."))
    elif (cases < 0).any():
        issues.append(
            ValidationIssue("FRAME_NEGATIVE_CASES", f"{int((cases < 0).sum())} row(s) have negative cases.")
        )

    dates = pd.to_datetime(frame["date"], errors="coerce")
    if dates.isna().sum() > frame["date"].isna().sum():
        issues.append(ValidationIssue("FRAME_DATE_TYPE", "Column 'date' has values that are not dates."))

    if issues:
        raise ValidationError(issues)
