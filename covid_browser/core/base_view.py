from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import pandas as pd
import plotly.graph_objs as go

from .dataset import Dataset
from .filter_state import FilterState, FilterProfile

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Common shape of every plot the browser can draw.

    A subclass sets:
    - 'id': stable key used in the store and the registry
    - 'label': text shown in the view selector
    - 'filter_profile': which filter widgets matter for it

    and implements the two halves of a render:
    - compute_data(state): the records (or aggregate) to show
    - render_figure(data, state): the Plotly figure for that data

    Views never cache; each render recomputes from the shared Dataset.
    """

    id: str = None
    label: str = None
    filter_profile = FilterProfile()

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self, state: FilterState) -> Any:
        """
        :param state: the session's current {@link FilterState}
        :return: whatever render_figure needs, usually a DataFrame
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: FilterState) -> go.Figure:
        """
        :param data: output of {@link compute_data()}
        :param state: the session's current {@link FilterState}
        :return: the figure to put in the main graph
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------
    def filtered_frame(self, state: FilterState) -> pd.DataFrame:
        """
        Dataset rows selected by the state's counties and time window.

        Raises InvalidRangeError for an inverted or incomplete window.
        """
        return self.dataset.subset_for_state(state)

    def timed_compute(self, state: FilterState) -> Any:
        started = time.perf_counter()
        data = self.compute_data(state)

        logger.info(
            "compute_data_done",
            extra={
                "view_id": self.id,
                "dataset": self.dataset.name,
                "elapsed_ms": round((time.perf_counter() - started) * 1000.0, 2),
                "n_rows": len(data) if hasattr(data, "__len__") else None,
            },
        )
        return data

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """Blank figure with a title, for selections that match no records."""
        fig = go.Figure()
        fig.update_layout(title=message, xaxis={"visible": False}, yaxis={"visible": False})
        return fig
