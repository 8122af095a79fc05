"""
Core domain layer: records and filter criteria, the pure record filter,
dataset abstraction, filter state, view base class and the view registry
"""

from .base_view import BaseView
from .criteria import DateRangeCriteria, FilterCriteria, MonthYearCriteria
from .dataset import Dataset
from .filter_state import FilterState
from .filtering import filter_records, select_records
from .record import Record
from .view_registry import ViewRegistry

__all__ = [
    "BaseView",
    "Dataset",
    "DateRangeCriteria",
    "FilterCriteria",
    "FilterState",
    "MonthYearCriteria",
    "Record",
    "ViewRegistry",
    "filter_records",
    "select_records",
]
