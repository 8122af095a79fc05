from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, TYPE_CHECKING

import pandas as pd

from .criteria import FilterCriteria
from .filtering import filter_records
from .record import Record

if TYPE_CHECKING:
    from .filter_state import FilterState

COLUMNS = ("county", "date", "cases", "month", "year")


@dataclass(frozen=True)
class ValidSets:
    """
    Cached valid values for UI validation / sanitisation.
    Computing .unique() on every input change is wasteful, so we do it once per Dataset.
    """
    counties: frozenset[str]
    years: tuple[int, ...]
    min_date: Optional[dt.date]
    max_date: Optional[dt.date]


class Dataset:
    """
    Unified dataset abstraction used throughout the browser.

    Wraps a long-format table with one row per (county, date):

        county | date | cases | month | year

    The frame is built once at load time and never mutated afterwards; every
    session reads the same instance. `subset()` always returns a new frame and
    is deliberately not cached.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        name: str,
        frame: pd.DataFrame,
        group: str = "Default",
        source: Optional[str] = None,
        file_path: Optional[Path] = None,
        default_view: Optional[str] = None,
        default_mode: Optional[str] = None,
        default_counties: Optional[Sequence[str]] = None,
    ) -> None:
        self.name = name
        self.group = group
        self.source = source
        self.file_path = file_path
        self.default_view = default_view
        self.default_mode = default_mode
        self.default_counties: List[str] = list(default_counties or [])

        self._frame = self._normalise_frame(frame)
        self._valid_sets: Optional[ValidSets] = None

    @classmethod
    def from_records(cls, name: str, records: Iterable[Record], **kwargs) -> Dataset:
        rows = [
            {"county": r.county, "date": r.date, "cases": r.cases}
            for r in records
        ]
        frame = pd.DataFrame(rows, columns=["county", "date", "cases"])
        return cls(name=name, frame=frame, **kwargs)

    # -------------------------------------------------------------------------
    # Internal: normalise the frame to the canonical column set / dtypes
    # -------------------------------------------------------------------------
    @staticmethod
    def _normalise_frame(frame: pd.DataFrame) -> pd.DataFrame:
        """
        Return a private copy with canonical dtypes:
        - county as str
        - date as datetime64 at midnight
        - cases as int64
        - month/year always derived from date
        """
        df = frame.loc[:, ["county", "date", "cases"]].copy()

        df["county"] = df["county"].astype(str)
        df["date"] = pd.to_datetime(df["date"]).dt.normalize()
        df["cases"] = df["cases"].astype("int64")
        df["month"] = df["date"].dt.month.astype("int64")
        df["year"] = df["date"].dt.year.astype("int64")

        return df.reset_index(drop=True)

    # -------------------------------------------------------------------------
    # Cached valid values for UI sanitisation
    # -------------------------------------------------------------------------
    def valid_sets(self) -> ValidSets:
        """
        Return cached valid values for dropdown sanitisation.

        This avoids recomputing `.unique()` in callbacks on every UI change.
        """
        if self._valid_sets is not None:
            return self._valid_sets

        df = self._frame
        if df.empty:
            self._valid_sets = ValidSets(
                counties=frozenset(), years=(), min_date=None, max_date=None
            )
            return self._valid_sets

        self._valid_sets = ValidSets(
            counties=frozenset(df["county"].unique()),
            years=tuple(sorted(int(y) for y in df["year"].unique())),
            min_date=df["date"].min().date(),
            max_date=df["date"].max().date(),
        )
        return self._valid_sets

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def subset(self, criteria: FilterCriteria) -> pd.DataFrame:
        """
        Rows matching `criteria`, in dataset order. Recomputed on every call.
        """
        return filter_records(self._frame, criteria)

    def subset_for_state(self, state: "FilterState") -> pd.DataFrame:
        """
        Convenience wrapper to subset this Dataset based on a FilterState.

        Raises InvalidRangeError if the state's window is unusable.
        """
        return self.subset(state.to_criteria())

    # -------------------------------------------------------------------------
    # Properties & getters
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        """The full long-format table. Shared between sessions: treat as read-only."""
        return self._frame

    @property
    def counties(self) -> List[str]:
        """Known county labels, sorted."""
        return sorted(self.valid_sets().counties)

    @property
    def years(self) -> List[int]:
        return list(self.valid_sets().years)

    def records(self) -> Iterator[Record]:
        """Yield every row as a Record, in dataset order."""
        for row in self._frame.itertuples(index=False):
            yield Record(county=row.county, date=row.date.date(), cases=int(row.cases))

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_rows={len(self)})"
