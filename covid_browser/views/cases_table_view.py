from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from covid_browser.core.base_view import BaseView
from covid_browser.core.filter_state import FilterState, FilterProfile

TABLE_COLUMNS = ["county", "date", "cases", "month", "year"]


class CasesTableView(BaseView):
    id = "cases_table"
    label = "Records table"

    filter_profile = FilterProfile()

    # Plotly tables get sluggish past a few thousand rows; the CSV download has everything
    MAX_ROWS = 5000

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        df = self.filtered_frame(state)
        out = df.loc[:, TABLE_COLUMNS].copy()
        out["date"] = out["date"].dt.strftime("%Y-%m-%d")
        return out

    def render_figure(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data.empty:
            return self.empty_figure("No records match the current filters")

        shown = data.head(self.MAX_ROWS)
        fig = go.Figure(
            go.Table(
                header=dict(values=[c.capitalize() for c in shown.columns], align="left"),
                cells=dict(values=[shown[c].tolist() for c in shown.columns], align="left"),
            )
        )

        title = f"{self.dataset.name}: {len(data)} record(s), {state.describe_window()}"
        if len(data) > self.MAX_ROWS:
            title += f" (first {self.MAX_ROWS} shown)"
        fig.update_layout(title=title, margin=dict(l=20, r=20, t=60, b=20))
        return fig
