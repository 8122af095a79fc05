import pandas as pd
import pytest

from covid_browser.validation import ValidationError, validate_frame


def _make_frame(**overrides) -> pd.DataFrame:
    data = {
        "county": ["Dakota", "Ramsey"],
        "date": pd.to_datetime(["2021-01-01", "2021-01-02"]),
        "cases": [1, 2],
    }
    data.update(overrides)
    return pd.DataFrame(data)


def _codes(exc_info) -> list[str]:
    return [issue.code for issue in exc_info.value.issues]


def test_valid_frame_passes():
    validate_frame(_make_frame())


def test_missing_columns_reported_immediately():
    frame = _make_frame().drop(columns=["cases"])

    with pytest.raises(ValidationError) as exc_info:
        validate_frame(frame)

    assert _codes(exc_info) == ["FRAME_MISSING_COLUMNS"]
    assert "cases" in str(exc_info.value)


def test_all_issues_are_collected():
    frame = _make_frame(county=["Dakota", None], cases=[-1, 3])

    with pytest.raises(ValidationError) as exc_info:
        validate_frame(frame)

    assert _codes(exc_info) == ["FRAME_NULLS", "FRAME_NEGATIVE_CASES"]


def test_non_numeric_cases_rejected():
    frame = _make_frame(cases=["1", "many"])

    with pytest.raises(ValidationError) as exc_info:
        validate_frame(frame)

    assert _codes(exc_info) == ["FRAME_CASES_TYPE"]


def test_non_date_values_rejected():
    frame = _make_frame(date=["2021-01-01", "someday"])

    with pytest.raises(ValidationError) as exc_info:
        validate_frame(frame)

    assert _codes(exc_info) == ["FRAME_DATE_TYPE"]
