from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .criteria import DateRangeCriteria, FilterCriteria, MonthYearCriteria
from .exceptions import InvalidRangeError
from .filter_profile import FilterProfile

MODE_MONTH_YEAR = "month_year"
MODE_DATE_RANGE = "date_range"
MODES = (MODE_MONTH_YEAR, MODE_DATE_RANGE)

__all__ = [
    "FilterState",
    "FilterProfile",
    "MODE_MONTH_YEAR",
    "MODE_DATE_RANGE",
    "MODES",
]


@dataclass
class FilterState:
    """
    Represents the current user selection/filters for one browser session.

    Fields:

    - counties: county labels selected by the user.
    - mode: which window is active, "month_year" or "date_range".
    - month_range / year: inclusive month window inside one year (month_year mode).
    - date_range: inclusive (start, end) ISO date strings (date_range mode).

    - log_scale: If True, views should draw case counts on a log axis

    Everything here is JSON-friendly so it can live in a dcc.Store.
    """

    # Global context
    dataset_name: str
    view_id: str

    mode: str = MODE_MONTH_YEAR

    # Core selections
    counties: List[str] = field(default_factory=list)
    month_range: Tuple[int, int] = (1, 12)
    year: Optional[int] = None
    date_range: Tuple[Optional[str], Optional[str]] = (None, None)

    # Display options
    log_scale: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dataset_name": self.dataset_name,
            "view_id": self.view_id,
            "mode": self.mode,
            "counties": list(self.counties),
            "month_range": list(self.month_range),
            "year": self.year,
            "date_range": list(self.date_range),
            "log_scale": self.log_scale,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        month_range = data.get("month_range") or (1, 12)
        date_range = data.get("date_range") or (None, None)
        year = data.get("year")
        return cls(
            dataset_name=data.get("dataset_name"),
            view_id=data.get("view_id"),
            mode=data.get("mode") or MODE_MONTH_YEAR,
            counties=[str(c) for c in data.get("counties") or []],
            month_range=(int(month_range[0]), int(month_range[1])),
            year=int(year) if year is not None else None,
            date_range=(_iso_or_none(date_range[0]), _iso_or_none(date_range[1])),
            log_scale=bool(data.get("log_scale", False)),
        )

    def to_criteria(self) -> FilterCriteria:
        """
        Build the criteria for the active mode.

        Raises:
            InvalidRangeError: on a missing/inverted window
            ValueError: on an unknown mode
        """
        if self.mode == MODE_MONTH_YEAR:
            if self.year is None:
                raise InvalidRangeError("year is required in month & year mode")
            return MonthYearCriteria(
                counties=frozenset(self.counties),
                month_range=tuple(self.month_range),
                year=self.year,
            )

        if self.mode == MODE_DATE_RANGE:
            start, end = self.date_range
            if start is None or end is None:
                raise InvalidRangeError("date_range needs both a start and an end date")
            return DateRangeCriteria(
                counties=frozenset(self.counties),
                date_range=(start, end),
            )

        raise ValueError(f"Unknown filter mode '{self.mode}'")

    def describe_window(self) -> str:
        """Short human-readable form of the active window, for status lines and titles."""
        if self.mode == MODE_DATE_RANGE:
            start, end = self.date_range
            return f"{start or '?'} to {end or '?'}"
        lo, hi = self.month_range
        return f"months {lo}-{hi} of {self.year if self.year is not None else '?'}"


def _iso_or_none(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()[:10]
    return str(value)[:10]
