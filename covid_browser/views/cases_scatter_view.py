from __future__ import annotations

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from covid_browser.core.base_view import BaseView
from covid_browser.core.filter_state import FilterState, FilterProfile


class CasesScatterView(BaseView):
    """
    Cases over time

    - X = date, Y = cases
    - Color by county
    - Optional log Y axis
    """

    id = "cases_scatter"
    label = "Cases over time"

    filter_profile = FilterProfile(
        counties=True,
        month_range=True,
        year=True,
        date_range=True,
        log_scale=True,
    )

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        return self.filtered_frame(state)

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> Figure:
        title = f"{self.dataset.name}: daily cases, {state.describe_window()}"

        if data.empty:
            fig = self.empty_figure(f"{title} (no records match the current filters)")
            fig.update_layout(margin=dict(l=40, r=40, t=60, b=40))
            return fig

        fig = px.scatter(
            data,
            x="date",
            y="cases",
            color="county",
            log_y=state.log_scale,
            title=title,
            labels={"date": "Date", "cases": "Cases", "county": "County"},
        )
        fig.update_traces(marker=dict(size=6))
        fig.update_layout(margin=dict(l=40, r=40, t=60, b=40), legend_title_text="County")
        return fig
