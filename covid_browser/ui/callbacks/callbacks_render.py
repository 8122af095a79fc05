from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from covid_browser.core.exceptions import CovidBrowserError, InvalidRangeError
from covid_browser.ui.callbacks.callbacks_utils import try_parse_filter_state
from covid_browser.ui.ids import IDs

if TYPE_CHECKING:
    from covid_browser.core.filter_state import FilterState
    from covid_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    """Axis-free figure carrying a centred note instead of data."""
    lines = [title] if details is None else [title, details]
    fig = go.Figure()
    fig.add_annotation(
        text="<br><br>".join(lines),
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        showarrow=False,
        font={"size": 14},
    )
    fig.update_layout(
        xaxis={"visible": False},
        yaxis={"visible": False},
        margin=dict(l=30, r=30, t=30, b=30),
    )
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("This view could not be drawn.", details)


def render_state(ctx: AppConfig, state: "FilterState") -> go.Figure:
    """
    One render event: FilterState -> filtered records -> figure.

    An empty match is a normal outcome and is drawn by the view as an empty-state
    figure; only bad windows and real failures produce message/error figures.
    """
    try:
        ds = ctx.dataset_by_name.get(state.dataset_name)
    except CovidBrowserError as e:
        logger.error("Dataset unavailable", extra={"dataset": state.dataset_name, "error": str(e)})
        return _error_figure(f"The dataset '{state.dataset_name}' could not be loaded: {e}")

    if ds is None:
        return _error_figure(
            f"The dataset '{state.dataset_name}' is not available. "
            "Try reloading the app or selecting a different dataset."
        )

    registry = ctx.registry
    if registry is None:
        return _error_figure("View registry is not available.")

    try:
        view = registry.create(state.view_id, ds)
    except KeyError:
        return _error_figure(f"Unknown view '{state.view_id}'.")

    logger.info(
        "render_start",
        extra={
            "view_id": state.view_id,
            "dataset": state.dataset_name,
            "mode": state.mode,
            "n_counties": len(state.counties),
        },
    )

    try:
        data = view.timed_compute(state)
    except InvalidRangeError as e:
        return _message_figure("The selected time window is not valid.", str(e))

    return view.render_figure(data, state)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Store snapshot changed -> redraw the main graph
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Input(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def redraw_main_graph(fs_data: dict[str, Any] | None):
        if fs_data is None:
            return _message_figure("Nothing selected.", "Pick a dataset and a view to start.")

        state = try_parse_filter_state(fs_data)
        if state is None:
            return _error_figure("The stored filter selection could not be read.")

        try:
            return render_state(ctx, state)
        except Exception:
            logger.exception("Unhandled error while rendering", extra={"filter_state": fs_data})
            return _error_figure("Unexpected error; see the server log for details.")
