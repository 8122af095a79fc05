from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from covid_browser.core.filter_profile import FilterProfile
from covid_browser.core.filter_state import MODE_DATE_RANGE, MODE_MONTH_YEAR
from covid_browser.ui.helpers import (
    default_counties,
    default_date_range,
    default_mode,
    default_year,
    describe_dataset,
    get_filter_dropdown_options,
)
from covid_browser.ui.callbacks.callbacks_utils import lookup_dataset
from covid_browser.ui.ids import IDs

if TYPE_CHECKING:
    from covid_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _style(flag: bool) -> dict:
    return {} if flag else {"display": "none"}


def filter_visibility(profile: FilterProfile | None, mode: str | None) -> tuple[dict, ...]:
    """
    Styles for (county, mode, month, year, date, options) containers given the
    active view's profile and window mode.
    """
    profile = profile or FilterProfile()
    month_year = mode != MODE_DATE_RANGE
    show_mode = profile.date_range or profile.month_range or profile.year

    return (
        _style(profile.counties),
        _style(show_mode),
        _style(profile.month_range and month_year),
        _style(profile.year and month_year),
        _style(profile.date_range and not month_year),
        _style(profile.log_scale),
    )


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Sidebar metadata
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIDEBAR_DATASET_NAME, "children"),
        Output(IDs.Control.SIDEBAR_DATASET_META, "children"),
        Input(IDs.Control.DATASET_SELECT, "value"),
    )
    def update_sidebar_dataset_summary(dataset_name: str | None):
        ds = lookup_dataset(ctx, dataset_name)
        if ds is None:
            if dataset_name:
                return dataset_name, "Not available (see the plot for details)"
            return "No dataset", "0 records"
        return ds.name, describe_dataset(ds)

    # ---------------------------------------------------------
    # Dataset change -> widget options + this dataset's defaults
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COUNTY_SELECT, "options"),
        Output(IDs.Control.COUNTY_SELECT, "value"),
        Output(IDs.Control.YEAR_SELECT, "options"),
        Output(IDs.Control.YEAR_SELECT, "value"),
        Output(IDs.Control.MODE_RADIO, "value"),
        Output(IDs.Control.MONTH_RANGE, "value"),
        Output(IDs.Control.DATE_RANGE, "min_date_allowed"),
        Output(IDs.Control.DATE_RANGE, "max_date_allowed"),
        Output(IDs.Control.DATE_RANGE, "start_date"),
        Output(IDs.Control.DATE_RANGE, "end_date"),
        Input(IDs.Control.DATASET_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_filters(dataset_name: str | None):
        ds = lookup_dataset(ctx, dataset_name)
        if ds is None:
            return [], [], [], None, MODE_MONTH_YEAR, [1, 12], None, None, None, None

        county_options, year_options = get_filter_dropdown_options(ds)
        start, end = default_date_range(ds)
        return (
            county_options,
            default_counties(ds),
            year_options,
            default_year(ds),
            default_mode(ds),
            [1, 12],
            start,
            end,
            start,
            end,
        )

    # ---------------------------------------------------------
    # Hide/show filters based on active view + window mode
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COUNTY_FILTER_CONTAINER, "style"),
        Output(IDs.Control.MODE_CONTAINER, "style"),
        Output(IDs.Control.MONTH_FILTER_CONTAINER, "style"),
        Output(IDs.Control.YEAR_FILTER_CONTAINER, "style"),
        Output(IDs.Control.DATE_FILTER_CONTAINER, "style"),
        Output(IDs.Control.OPTIONS_CONTAINER, "style"),
        Input(IDs.Control.VIEW_SELECT, "value"),
        Input(IDs.Control.MODE_RADIO, "value"),
    )
    def update_filter_visibility(view_id: str | None, mode: str | None):
        view_cls = ctx.registry.get_class(view_id) if (ctx.registry and view_id) else None
        profile = getattr(view_cls, "filter_profile", None)
        return filter_visibility(profile, mode)
