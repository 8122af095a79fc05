"""
The record filter behind every view.

Both entry points are pure: same dataset + same criteria -> same result, no
state kept between calls, nothing cached.
"""
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from .criteria import DateRangeCriteria, FilterCriteria, MonthYearCriteria
from .record import Record


def _criteria_mask(frame: pd.DataFrame, criteria: FilterCriteria) -> pd.Series:
    # built without in-place ops: under copy-on-write column arrays are read-only
    mask = frame["county"].astype(str).isin(list(criteria.counties))

    if isinstance(criteria, MonthYearCriteria):
        lo, hi = criteria.month_range
        mask = mask & frame["month"].between(lo, hi) & (frame["year"] == criteria.year)

    elif isinstance(criteria, DateRangeCriteria):
        start, end = (pd.Timestamp(d) for d in criteria.date_range)
        dates = pd.to_datetime(frame["date"]).dt.normalize()
        mask = mask & dates.between(start, end)

    else:
        raise TypeError(f"Unsupported filter criteria: {type(criteria).__name__}")

    return mask


def filter_records(frame: pd.DataFrame, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Return the rows of `frame` matching `criteria`, in their original order.

    - county must be one of criteria.counties (empty set -> nothing matches)
    - month/year or date window, bounds inclusive on both ends
    - unknown counties or out-of-range windows give an empty frame, never an error

    The input frame is not modified; the original index is kept so callers can
    line results up with the source rows.
    """
    if frame.empty or not criteria.counties:
        return frame.iloc[0:0].copy()

    mask = _criteria_mask(frame, criteria)
    return frame.loc[mask].copy()


def select_records(records: Iterable[Record], criteria: FilterCriteria) -> List[Record]:
    """Same rule as filter_records, over a plain sequence of Record values."""
    return [r for r in records if criteria.matches(r)]
