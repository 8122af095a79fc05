from __future__ import annotations

import dash_bootstrap_components as dbc

from dash import dcc, html

from covid_browser.ui.ids import IDs


def build_plot_panel() -> dbc.Card:
    """Main graph card: status line on top, figure, CSV download underneath."""
    header = dbc.CardHeader(
        html.Div(
            [
                html.Strong("Cases"),
                html.Div(id=IDs.Control.STATUS_BAR, className="ms-auto text-muted small"),
            ],
            className="d-flex align-items-center gap-2",
        ),
        className="py-2",
    )

    graph = dcc.Loading(
        type="circle",
        children=dcc.Graph(
            id=IDs.Control.MAIN_GRAPH,
            config={"responsive": True, "displaylogo": False},
            className="cb-main-graph",
        ),
    )

    download_row = html.Div(
        [
            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
            dbc.Button(
                "Download records (CSV)",
                id=IDs.Control.DOWNLOAD_DATA_BTN,
                color="secondary",
                outline=True,
                size="sm",
            ),
        ],
        className="d-flex justify-content-end mt-2",
    )

    return dbc.Card(
        [header, dbc.CardBody([graph, download_row], className="cb-main-body")],
        className="cb-maincard",
    )
