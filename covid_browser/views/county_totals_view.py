from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from covid_browser.core.base_view import BaseView
from covid_browser.core.filter_state import FilterState, FilterProfile


class CountyTotalsView(BaseView):
    """
    Total cases per county over the selected window, largest first.

    Handy sanity check that the county / window filters do what they say.
    """

    id = "county_totals"
    label = "Totals by county"

    filter_profile = FilterProfile(log_scale=True)

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        df = self.filtered_frame(state)
        if df.empty:
            return pd.DataFrame(columns=["county", "cases", "n_days"])

        totals = (
            df.groupby("county", sort=False)
            .agg(cases=("cases", "sum"), n_days=("date", "nunique"))
            .reset_index()
        )
        return totals.sort_values(["cases", "county"], ascending=[False, True], kind="stable").reset_index(drop=True)

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data.empty:
            return self.empty_figure("No records match the current filters; adjust counties or the time window")

        fig = go.Figure(
            go.Bar(
                x=data["county"],
                y=data["cases"],
                customdata=data["n_days"],
                hovertemplate="%{x}<br>%{y} cases over %{customdata} day(s)<extra></extra>",
            )
        )
        fig.update_xaxes(title_text="County")
        fig.update_yaxes(title_text="Total cases", type="log" if state.log_scale else "linear")
        fig.update_layout(
            title=f"{self.dataset.name}: total cases, {state.describe_window()}",
            margin=dict(l=40, r=40, t=60, b=40),
            showlegend=False,
        )
        return fig
