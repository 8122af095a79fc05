from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, html

from covid_browser.core.exceptions import CovidBrowserError
from covid_browser.core.filter_state import FilterState, MODES, MODE_MONTH_YEAR
from covid_browser.ui.callbacks.callbacks_utils import try_parse_filter_state
from covid_browser.ui.helpers import (
    default_counties,
    default_date_range,
    default_mode,
    default_year,
)
from covid_browser.ui.ids import IDs
from covid_browser.ui.layout.build_filter_panel import OPT_LOG_SCALE

if TYPE_CHECKING:
    from covid_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_filter_state(ctx: AppConfig, inputs: dict[str, Any]) -> dict[str, Any] | None:
    """
    Pure helper: turn one input-change event into a FilterState snapshot (as a dict
    ready for the session store), validated against the dataset's known values.

    Ranges are passed through as given; an inverted window is reported when the
    snapshot is turned into criteria, not silently repaired here.
    """
    dataset_name = inputs.get("dataset")
    view_id = inputs.get("view")

    if not dataset_name or not view_id:
        return None

    try:
        ds = ctx.dataset_by_name.get(dataset_name)
    except CovidBrowserError as e:
        # still publish a snapshot so the render callback can report the failure
        logger.warning("Dataset unavailable", extra={"dataset": dataset_name, "error": str(e)})
        return FilterState(dataset_name=dataset_name, view_id=view_id).to_dict()

    if ds is None:
        return None

    if ctx.registry is not None and ctx.registry.get_class(view_id) is None:
        return None

    # If the dataset just changed, the county/year/date inputs still hold values
    # from the previous dataset. Start from this dataset's defaults instead; the
    # filter callbacks push the same defaults back into the widgets.
    dataset_changed = inputs.get("triggered_id") == IDs.Control.DATASET_SELECT

    valid = ds.valid_sets()
    fallback_start, fallback_end = default_date_range(ds)

    if dataset_changed:
        counties = default_counties(ds)
        mode = default_mode(ds)
        month_range = (1, 12)
        year = default_year(ds)
        date_range = (fallback_start, fallback_end)
    else:
        # Drop labels this dataset doesn't know; they could never match anyway
        counties = [str(c) for c in (inputs.get("counties") or []) if str(c) in valid.counties]

        mode = inputs.get("mode")
        if mode not in MODES:
            mode = MODE_MONTH_YEAR

        raw_months = inputs.get("month_range") or [1, 12]
        month_range = (int(raw_months[0]), int(raw_months[1]))

        year = inputs.get("year")
        if year is None or int(year) not in valid.years:
            year = default_year(ds)
        else:
            year = int(year)

        date_range = (
            inputs.get("date_start") or fallback_start,
            inputs.get("date_end") or fallback_end,
        )

    options = set(inputs.get("options") or [])

    state = FilterState(
        dataset_name=dataset_name,
        view_id=view_id,
        mode=mode,
        counties=counties,
        month_range=month_range,
        year=year,
        date_range=date_range,
        log_scale=OPT_LOG_SCALE in options,
    )
    # from_dict normalises the date strings the same way the store will
    return FilterState.from_dict(state.to_dict()).to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI event -> FilterState snapshot (canonical, per session)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.DATASET_SELECT, "value"),
        Input(IDs.Control.VIEW_SELECT, "value"),
        Input(IDs.Control.COUNTY_SELECT, "value"),
        Input(IDs.Control.MODE_RADIO, "value"),
        Input(IDs.Control.MONTH_RANGE, "value"),
        Input(IDs.Control.YEAR_SELECT, "value"),
        Input(IDs.Control.DATE_RANGE, "start_date"),
        Input(IDs.Control.DATE_RANGE, "end_date"),
        Input(IDs.Control.OPTIONS_CHECKLIST, "value"),
    )
    def sync_filter_state_from_ui(
            ds_val, view_val, county_val, mode_val, month_val, year_val,
            start_val, end_val, opt_val
    ):
        inputs = {
            "triggered_id": dash.ctx.triggered_id,
            "dataset": ds_val,
            "view": view_val,
            "counties": county_val,
            "mode": mode_val,
            "month_range": month_val,
            "year": year_val,
            "date_start": start_val,
            "date_end": end_val,
            "options": opt_val,
        }
        return build_filter_state(ctx, inputs)

    # ---------------------------------------------------------
    # Status Bar (Pure UI reflection of State)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_status_bar(fs_data):
        state = try_parse_filter_state(fs_data)
        if state is None:
            return html.Span([html.Strong("Status: "), "No dataset selected"])

        n_counties = len(state.counties)
        county_label = "none" if n_counties == 0 else f"{n_counties} selected"

        return html.Span(
            [
                html.Strong("Dataset: "), state.dataset_name, " • ",
                html.Strong("View: "), ctx.view_label(state.view_id), " • ",
                html.Strong("Counties: "), county_label, " • ",
                html.Strong("Window: "), state.describe_window(),
            ]
        )
