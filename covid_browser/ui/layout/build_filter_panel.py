from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from covid_browser.core.dataset import Dataset
from covid_browser.core.filter_state import MODE_DATE_RANGE, MODE_MONTH_YEAR
from covid_browser.ui.helpers import (
    MONTH_MARKS,
    default_counties,
    default_date_range,
    default_mode,
    default_year,
    describe_dataset,
    get_filter_dropdown_options,
)
from covid_browser.ui.ids import IDs

OPT_LOG_SCALE = "log_scale"


def _filter_block(container_id: str, label: str, control, target_id: str | None = None) -> html.Div:
    # each block sits in its own container so views can hide it
    return html.Div(
        [dbc.Label(label, html_for=target_id), control],
        id=container_id,
        className="mb-3",
    )


def build_filter_panel(default_dataset: Dataset) -> dbc.Card:
    """
    Sidebar with the dataset summary and every filter widget, pre-filled with
    the default dataset's options and defaults.
    """
    county_options, year_options = get_filter_dropdown_options(default_dataset)
    start_date, end_date = default_date_range(default_dataset)

    summary = html.Div(
        [
            html.H5(default_dataset.name, id=IDs.Control.SIDEBAR_DATASET_NAME, className="card-title"),
            html.P(
                describe_dataset(default_dataset),
                id=IDs.Control.SIDEBAR_DATASET_META,
                className="card-subtitle text-muted small",
            ),
            html.Hr(),
        ]
    )

    counties = _filter_block(
        IDs.Control.COUNTY_FILTER_CONTAINER,
        "Counties",
        dcc.Dropdown(
            id=IDs.Control.COUNTY_SELECT,
            options=county_options,
            value=default_counties(default_dataset),
            multi=True,
            placeholder="Pick one or more counties",
        ),
        IDs.Control.COUNTY_SELECT,
    )

    mode = _filter_block(
        IDs.Control.MODE_CONTAINER,
        "Time window",
        dbc.RadioItems(
            id=IDs.Control.MODE_RADIO,
            options=[
                {"label": "Month & year", "value": MODE_MONTH_YEAR},
                {"label": "Date range", "value": MODE_DATE_RANGE},
            ],
            value=default_mode(default_dataset),
            inline=True,
        ),
    )

    months = _filter_block(
        IDs.Control.MONTH_FILTER_CONTAINER,
        "Months",
        dcc.RangeSlider(
            id=IDs.Control.MONTH_RANGE,
            min=1,
            max=12,
            step=1,
            value=[1, 12],
            marks=MONTH_MARKS,
        ),
    )

    year = _filter_block(
        IDs.Control.YEAR_FILTER_CONTAINER,
        "Year",
        dcc.Dropdown(
            id=IDs.Control.YEAR_SELECT,
            options=year_options,
            value=default_year(default_dataset),
            clearable=False,
        ),
        IDs.Control.YEAR_SELECT,
    )

    dates = _filter_block(
        IDs.Control.DATE_FILTER_CONTAINER,
        "Dates",
        dcc.DatePickerRange(
            id=IDs.Control.DATE_RANGE,
            min_date_allowed=start_date,
            max_date_allowed=end_date,
            start_date=start_date,
            end_date=end_date,
            display_format="YYYY-MM-DD",
        ),
    )

    options = html.Div(
        [
            html.Hr(),
            dbc.Checklist(
                id=IDs.Control.OPTIONS_CHECKLIST,
                options=[{"label": "Log scale", "value": OPT_LOG_SCALE}],
                value=[],
                switch=True,
            ),
        ],
        id=IDs.Control.OPTIONS_CONTAINER,
    )

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody([summary, counties, mode, months, year, dates, options]),
        ],
        className="cb-sidebar",
    )
