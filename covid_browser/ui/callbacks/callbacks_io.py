from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

import dash
import pandas as pd
from dash import Input, Output, State, dcc, exceptions

from covid_browser.core.exceptions import InvalidRangeError
from covid_browser.ui.callbacks.callbacks_utils import lookup_dataset, try_parse_filter_state
from covid_browser.ui.ids import IDs

if TYPE_CHECKING:
    from covid_browser.core.filter_state import FilterState
    from covid_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def export_frame(ctx: AppConfig, state: "FilterState") -> Optional[Tuple[pd.DataFrame, str]]:
    """
    The records behind the current figure, ready for CSV, plus a file name.
    None when there is nothing sensible to export.
    """
    ds = lookup_dataset(ctx, state.dataset_name)
    if ds is None:
        return None

    try:
        data = ds.subset_for_state(state)
    except InvalidRangeError:
        logger.info("Download skipped: invalid window", extra={"dataset": ds.name})
        return None

    if data.empty:
        return None

    out = data.copy()
    out["date"] = out["date"].dt.strftime("%Y-%m-%d")
    return out, f"{ds.name.replace(' ', '_')}_records.csv"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download the records behind the current figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, fs_data):
        state = try_parse_filter_state(fs_data)
        if not n_clicks or state is None:
            raise exceptions.PreventUpdate

        exported = export_frame(ctx, state)
        if exported is None:
            raise exceptions.PreventUpdate

        out, filename = exported
        return dcc.send_data_frame(out.to_csv, filename, index=False)
