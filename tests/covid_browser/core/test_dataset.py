import datetime as dt

import pandas as pd

from covid_browser.core.criteria import MonthYearCriteria
from covid_browser.core.dataset import Dataset
from covid_browser.core.filter_state import FilterState
from covid_browser.core.record import Record


def _make_dataset() -> Dataset:
    frame = pd.DataFrame(
        {
            "county": ["Dakota", "Aitkin", "Dakota", "Ramsey"],
            "date": [
                pd.Timestamp("2020-12-30 14:00"),
                pd.Timestamp("2021-03-05"),
                pd.Timestamp("2021-03-05"),
                pd.Timestamp("2021-07-01"),
            ],
            "cases": [5, 2, 10, 7],
        },
        index=[10, 11, 12, 13],
    )
    return Dataset(name="TestDataset", frame=frame, default_counties=["Dakota"])


def test_frame_is_normalised():
    ds = _make_dataset()
    df = ds.frame

    assert list(df.columns) == ["county", "date", "cases", "month", "year"]
    assert list(df.index) == [0, 1, 2, 3]
    assert pd.api.types.is_datetime64_any_dtype(df["date"])
    assert df["date"].iloc[0] == pd.Timestamp("2020-12-30")
    assert list(df["month"]) == [12, 3, 3, 7]
    assert list(df["year"]) == [2020, 2021, 2021, 2021]


def test_constructor_does_not_alias_input_frame():
    frame = pd.DataFrame({"county": ["Dakota"], "date": ["2021-01-01"], "cases": [1]})
    ds = Dataset(name="Alias", frame=frame)

    frame.loc[0, "cases"] = 99

    assert ds.frame["cases"].iloc[0] == 1


def test_valid_sets():
    ds = _make_dataset()
    valid = ds.valid_sets()

    assert valid.counties == frozenset({"Dakota", "Aitkin", "Ramsey"})
    assert valid.years == (2020, 2021)
    assert valid.min_date == dt.date(2020, 12, 30)
    assert valid.max_date == dt.date(2021, 7, 1)
    assert ds.valid_sets() is valid
    assert ds.counties == ["Aitkin", "Dakota", "Ramsey"]
    assert ds.years == [2020, 2021]


def test_valid_sets_of_empty_dataset():
    valid = Dataset.from_records("Empty", []).valid_sets()

    assert valid.counties == frozenset()
    assert valid.years == ()
    assert valid.min_date is None
    assert valid.max_date is None


def test_records_preserve_order():
    ds = _make_dataset()

    records = list(ds.records())

    assert [r.county for r in records] == ["Dakota", "Aitkin", "Dakota", "Ramsey"]
    assert records[0] == Record("Dakota", dt.date(2020, 12, 30), 5)
    assert len(ds) == 4


def test_subset_is_recomputed_each_call():
    ds = _make_dataset()
    criteria = MonthYearCriteria(counties={"Dakota"}, month_range=(1, 12), year=2021)

    first = ds.subset(criteria)
    second = ds.subset(criteria)

    assert first is not second
    assert list(first["cases"]) == [10]


def test_subset_for_state():
    ds = _make_dataset()
    state = FilterState(
        dataset_name=ds.name,
        view_id="cases_table",
        counties=["Dakota", "Ramsey"],
        month_range=(3, 7),
        year=2021,
    )

    sub = ds.subset_for_state(state)

    assert list(sub["county"]) == ["Dakota", "Ramsey"]
    assert list(sub.index) == [2, 3]
