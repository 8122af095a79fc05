import pandas as pd

from covid_browser.core.dataset import Dataset
from covid_browser.core.filter_state import FilterState, MODE_DATE_RANGE
from covid_browser.views.county_totals_view import CountyTotalsView


def _make_dataset() -> Dataset:
    frame = pd.DataFrame(
        {
            "county": ["Dakota", "Aitkin", "Dakota", "Ramsey", "Aitkin", "Ramsey"],
            "date": [
                "2021-03-05",
                "2021-03-05",
                "2021-03-12",
                "2021-03-12",
                "2021-03-19",
                "2021-03-19",
            ],
            "cases": [4, 1, 3, 5, 6, 2],
        }
    )
    return Dataset(name="TotalsDataset", frame=frame)


def _make_state(**overrides) -> FilterState:
    kwargs = dict(
        dataset_name="TotalsDataset",
        view_id=CountyTotalsView.id,
        mode=MODE_DATE_RANGE,
        counties=["Dakota", "Aitkin", "Ramsey"],
        date_range=("2021-03-01", "2021-03-31"),
    )
    kwargs.update(overrides)
    return FilterState(**kwargs)


def test_compute_data_sums_per_county_largest_first():
    view = CountyTotalsView(_make_dataset())

    df = view.compute_data(_make_state())

    # Dakota and Ramsey tie on 7; ties break alphabetically
    assert list(df["county"]) == ["Aitkin", "Dakota", "Ramsey"]
    assert list(df["cases"]) == [7, 7, 7]
    assert list(df["n_days"]) == [2, 2, 2]


def test_compute_data_respects_window():
    view = CountyTotalsView(_make_dataset())

    df = view.compute_data(_make_state(date_range=("2021-03-05", "2021-03-12")))

    assert list(df["county"]) == ["Dakota", "Ramsey", "Aitkin"]
    assert list(df["cases"]) == [7, 5, 1]


def test_render_figure_bar_per_county():
    view = CountyTotalsView(_make_dataset())
    state = _make_state(log_scale=True)

    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data) == 1
    assert list(fig.data[0].x) == ["Aitkin", "Dakota", "Ramsey"]
    assert fig.layout.yaxis.type == "log"


def test_empty_result_has_columns_and_empty_figure():
    view = CountyTotalsView(_make_dataset())
    state = _make_state(counties=["Atlantis"])

    df = view.compute_data(state)
    fig = view.render_figure(df, state)

    assert df.empty
    assert list(df.columns) == ["county", "cases", "n_days"]
    assert len(fig.data) == 0
