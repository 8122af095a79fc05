from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import dcc, html

from covid_browser.config.model import GlobalConfig
from covid_browser.ui.ids import IDs


def build_navbar(
    dataset_names: List[str],
    global_config: GlobalConfig,
    default_name: str | None,
) -> dbc.Navbar:
    """Title block on the left, dataset picker on the right."""
    brand = html.Div(
        [
            html.H3(global_config.ui_title, className="mb-0"),
            html.Small(global_config.subtitle, className="text-muted"),
        ],
        className="d-flex flex-column",
    )

    dataset_picker = html.Div(
        [
            dbc.Label("Dataset", html_for=IDs.Control.DATASET_SELECT, className="navbar-dataset-title mb-1"),
            dcc.Dropdown(
                id=IDs.Control.DATASET_SELECT,
                options=[{"label": name, "value": name} for name in dataset_names],
                value=default_name,
                clearable=False,
                placeholder="Choose a dataset",
            ),
        ],
        className="ms-auto cb-dataset-picker",
    )

    return dbc.Navbar(
        dbc.Container([brand, dataset_picker], fluid=True),
        color="white",
        className="shadow-sm cb-navbar",
    )
