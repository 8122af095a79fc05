"""
Config package for covid_browser.

Responsible for:
- config models (GlobalConfig, DatasetConfig, ColumnMapping)
- config I/O helpers (load_global_config / load_dataset_registry)
"""

from .model import ColumnMapping, DatasetConfig, GlobalConfig
from .loader import load_dataset_registry, load_global_config

__all__ = [
    "ColumnMapping",
    "DatasetConfig",
    "GlobalConfig",
    "load_dataset_registry",
    "load_global_config",
]
