from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Tuple, Union

from .exceptions import InvalidRangeError
from .record import Record, as_date


def _as_county_set(counties: Iterable[str] | str | None) -> FrozenSet[str]:
    if counties is None:
        return frozenset()
    if isinstance(counties, str):
        counties = [counties]
    return frozenset(str(c) for c in counties)


def _as_int(value: Any, name: str) -> int:
    # bool is an int subclass; a True/False bound is always a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRangeError(f"{name} must be an integer, got {value!r}")
    return value


def _as_pair(value: Any, name: str) -> Tuple[Any, Any]:
    try:
        lo, hi = value
    except (TypeError, ValueError):
        raise InvalidRangeError(f"{name} must be a (lower, upper) pair, got {value!r}") from None
    return lo, hi


def _check_order(lo: Any, hi: Any, name: str) -> None:
    if lo > hi:
        raise InvalidRangeError(f"{name} lower bound {lo} exceeds upper bound {hi}")


@dataclass(frozen=True)
class MonthYearCriteria:
    """
    Counties + inclusive month window within a single year.

    Month bounds are not clamped to 1..12: a (0, 12) window is legal and simply
    covers every month.
    """
    counties: FrozenSet[str]
    month_range: Tuple[int, int]
    year: int

    def __post_init__(self) -> None:
        lo, hi = _as_pair(self.month_range, "month_range")
        lo = _as_int(lo, "month_range lower bound")
        hi = _as_int(hi, "month_range upper bound")
        _check_order(lo, hi, "month_range")

        object.__setattr__(self, "counties", _as_county_set(self.counties))
        object.__setattr__(self, "month_range", (lo, hi))
        object.__setattr__(self, "year", _as_int(self.year, "year"))

    def matches(self, record: Record) -> bool:
        lo, hi = self.month_range
        return (
            record.county in self.counties
            and lo <= record.month <= hi
            and record.year == self.year
        )


@dataclass(frozen=True)
class DateRangeCriteria:
    """
    Counties + inclusive calendar-date window.
    """
    counties: FrozenSet[str]
    date_range: Tuple[dt.date, dt.date]

    def __post_init__(self) -> None:
        lo, hi = _as_pair(self.date_range, "date_range")
        try:
            start, end = as_date(lo), as_date(hi)
        except (TypeError, ValueError) as e:
            raise InvalidRangeError(f"date_range bounds must be dates: {e}") from e
        _check_order(start, end, "date_range")

        object.__setattr__(self, "counties", _as_county_set(self.counties))
        object.__setattr__(self, "date_range", (start, end))

    def matches(self, record: Record) -> bool:
        start, end = self.date_range
        return record.county in self.counties and start <= record.date <= end


FilterCriteria = Union[MonthYearCriteria, DateRangeCriteria]
