from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional, Tuple

from covid_browser.core.dataset import Dataset
from covid_browser.core.filter_state import MODE_MONTH_YEAR, MODES

MONTH_MARKS: Dict[int, str] = {
    1: "Jan", 2: "Feb", 3: "Mar", 4: "Apr", 5: "May", 6: "Jun",
    7: "Jul", 8: "Aug", 9: "Sep", 10: "Oct", 11: "Nov", 12: "Dec",
}


def get_filter_dropdown_options(dataset: Dataset) -> Tuple[List[dict], List[dict]]:
    county_options = [{"label": c, "value": c} for c in dataset.counties]
    year_options = [{"label": str(y), "value": y} for y in dataset.years]
    return county_options, year_options


def default_counties(dataset: Dataset) -> List[str]:
    """
    Configured default counties that actually exist in the data; otherwise the
    first county alphabetically so the first plot is not empty.
    """
    valid = dataset.valid_sets().counties
    chosen = [c for c in dataset.default_counties if c in valid]
    if chosen:
        return chosen
    return dataset.counties[:1]


def default_year(dataset: Dataset) -> Optional[int]:
    years = dataset.years
    return years[-1] if years else None


def default_date_range(dataset: Dataset) -> Tuple[Optional[str], Optional[str]]:
    valid = dataset.valid_sets()
    return _iso(valid.min_date), _iso(valid.max_date)


def default_mode(dataset: Dataset) -> str:
    return dataset.default_mode if dataset.default_mode in MODES else MODE_MONTH_YEAR


def describe_dataset(dataset: Dataset) -> str:
    valid = dataset.valid_sets()
    span = (
        f" · {valid.min_date:%Y-%m-%d} to {valid.max_date:%Y-%m-%d}"
        if valid.min_date is not None
        else ""
    )
    return f"{len(dataset)} records · {len(valid.counties)} counties{span}"


def _iso(value: Optional[dt.date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
