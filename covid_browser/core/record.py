from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Mapping

import pandas as pd


def as_date(value: Any) -> dt.date:
    """
    Coerce a date-like value (date, datetime, pd.Timestamp, ISO string) to a plain date.
    """
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        return dt.date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Cannot interpret {value!r} as a date")


@dataclass(frozen=True)
class Record:
    """
    One row of case-count data for a county on a given date.

    `month` and `year` are derived from `date` so they can never disagree with it.
    """
    county: str
    date: dt.date
    cases: int

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def year(self) -> int:
        return self.date.year

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Record:
        return cls(
            county=str(row["county"]),
            date=as_date(row["date"]),
            cases=int(row["cases"]),
        )
