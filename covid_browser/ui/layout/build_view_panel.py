from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from covid_browser.core.view_registry import ViewRegistry
from covid_browser.ui.ids import IDs


def build_view_panel(registry: ViewRegistry, default_view_id: str | None = None) -> dbc.Card:
    view_classes = registry.all_classes()

    # fall back to the first registered view if the dataset's default is unknown
    if default_view_id not in {cls.id for cls in view_classes}:
        default_view_id = view_classes[0].id if view_classes else None

    return dbc.Card(
        [
            dbc.CardHeader("View", className="fw-semibold"),
            dbc.CardBody(
                [
                    dcc.Dropdown(
                        id=IDs.Control.VIEW_SELECT,
                        options=[{"label": cls.label, "value": cls.id} for cls in view_classes],
                        value=default_view_id,
                        clearable=False,
                    ),
                    html.Small(
                        "Scatter over time, totals per county, or the raw records.",
                        className="text-muted",
                    ),
                ]
            ),
        ],
        className="mb-3",
    )
