import pandas as pd

from covid_browser.core.dataset import Dataset
from covid_browser.core.filter_state import FilterState
from covid_browser.views.cases_table_view import CasesTableView


def _make_dataset() -> Dataset:
    frame = pd.DataFrame(
        {
            "county": ["Ramsey", "Dakota", "Ramsey"],
            "date": ["2020-01-10", "2020-01-10", "2020-06-10"],
            "cases": [4, 3, 9],
        }
    )
    return Dataset(name="TableDataset", frame=frame)


def _make_state(**overrides) -> FilterState:
    kwargs = dict(
        dataset_name="TableDataset",
        view_id=CasesTableView.id,
        counties=["Ramsey", "Dakota"],
        month_range=(1, 12),
        year=2020,
    )
    kwargs.update(overrides)
    return FilterState(**kwargs)


def test_compute_data_formats_dates():
    view = CasesTableView(_make_dataset())

    df = view.compute_data(_make_state())

    assert list(df.columns) == ["county", "date", "cases", "month", "year"]
    assert list(df["date"]) == ["2020-01-10", "2020-01-10", "2020-06-10"]
    assert list(df["county"]) == ["Ramsey", "Dakota", "Ramsey"]


def test_render_figure_table():
    view = CasesTableView(_make_dataset())
    state = _make_state()

    fig = view.render_figure(view.compute_data(state), state)

    table = fig.data[0]
    assert list(table.header.values) == ["County", "Date", "Cases", "Month", "Year"]
    assert list(table.cells.values[2]) == [4, 3, 9]
    assert fig.layout.title.text.startswith("TableDataset: 3 record(s)")


def test_render_figure_caps_rows():
    view = CasesTableView(_make_dataset())
    view.MAX_ROWS = 2
    state = _make_state()

    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data[0].cells.values[0]) == 2
    assert "(first 2 shown)" in fig.layout.title.text


def test_empty_result_renders_empty_state():
    view = CasesTableView(_make_dataset())
    state = _make_state(month_range=(2, 5))

    fig = view.render_figure(view.compute_data(state), state)

    assert len(fig.data) == 0
    assert fig.layout.title.text == "No records match the current filters"
