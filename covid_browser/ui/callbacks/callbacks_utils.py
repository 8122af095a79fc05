from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional

from covid_browser.core.exceptions import CovidBrowserError
from covid_browser.core.filter_state import FilterState

if TYPE_CHECKING:
    from covid_browser.core.dataset import Dataset
    from covid_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

def try_parse_filter_state(data: object) -> Optional[FilterState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return FilterState.from_dict(data)
    except (TypeError, ValueError, IndexError):
        logger.exception("Invalid filter-state: %r", data)
        return None


def lookup_dataset(ctx: AppConfig, name: str | None) -> Optional[Dataset]:
    """
    Dataset for a widget callback, or None if it is unknown or failed to load.
    The failure itself is surfaced by the render callback.
    """
    if not name:
        return None
    try:
        return ctx.dataset_by_name.get(name)
    except CovidBrowserError as e:
        logger.warning("Dataset unavailable", extra={"dataset": name, "error": str(e)})
        return None
