from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from covid_browser.ui.layout.build_filter_panel import build_filter_panel
from covid_browser.ui.layout.build_navbar import build_navbar
from covid_browser.ui.layout.build_plot_panel import build_plot_panel
from covid_browser.ui.layout.build_view_panel import build_view_panel
from covid_browser.ui.ids import IDs

if TYPE_CHECKING:
    from covid_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    default_dataset = ctx.default_dataset

    navbar = build_navbar(
        ctx.dataset_names,
        ctx.global_config,
        default_dataset.name if default_dataset is not None else None,
    )

    if default_dataset is None:
        filter_panel = dbc.Card(
            dbc.CardBody("No datasets configured. Add a dataset file under config/datasets."),
            className="cb-sidebar",
        )
        default_view_id = None
    else:
        filter_panel = build_filter_panel(default_dataset)
        default_view_id = default_dataset.default_view

    view_panel = build_view_panel(ctx.registry, default_view_id)
    plot_panel = build_plot_panel()

    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            navbar,

            # Per-session filter snapshot; each browser tab gets its own copy
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="session"),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            view_panel,
                            filter_panel,
                        ],
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        plot_panel,
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
