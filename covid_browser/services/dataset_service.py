from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from covid_browser.config.model import DatasetConfig
from covid_browser.core.dataset import Dataset
from covid_browser.core.dataset_loader import from_config
from covid_browser.core.exceptions import DatasetConfigError, DatasetSchemaError

logger = logging.getLogger(__name__)


class DatasetManager(Mapping[str, Dataset]):
    """
    Central service for managing datasets.
    Implements the Mapping interface (dict-like) to support lazy loading
    transparency for the UI layer.

    Each dataset is materialised at most once and then handed to every session
    as the same read-only instance. Only the first load takes the lock; reads of
    an already-loaded dataset do not.
    """

    def __init__(self, cfg_by_name: Dict[str, DatasetConfig], data_root: Optional[Path] = None):
        self._cfg_by_name = cfg_by_name
        self._data_root = data_root
        self._loaded: Dict[str, Dataset] = {}
        self._load_lock = threading.Lock()

    def __getitem__(self, name: str) -> Dataset:
        # 1. Fast path: already materialised
        ds = self._loaded.get(name)
        if ds is not None:
            return ds

        # 2. Check config existence
        cfg = self._cfg_by_name.get(name)
        if cfg is None:
            raise KeyError(f"Unknown dataset '{name}'")

        # 3. Lazy load (double-checked so concurrent first requests load once)
        with self._load_lock:
            ds = self._loaded.get(name)
            if ds is not None:
                return ds

            try:
                logger.info("Lazy-loading dataset", extra={"dataset": cfg.name, "source": cfg.source})
                ds = from_config(cfg, self._data_root)
            except (DatasetConfigError, DatasetSchemaError) as e:
                logger.error(
                    "Dataset error on load",
                    extra={"dataset": cfg.name, "error": str(e)},
                )
                raise
            except Exception:
                logger.exception(
                    "Unexpected error while loading dataset",
                    extra={"dataset": cfg.name},
                )
                raise

            self._loaded[name] = ds
            return ds

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_name)

    def __len__(self) -> int:
        return len(self._cfg_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._cfg_by_name

    def get(self, name: str, default=None) -> Dataset | None:
        try:
            return self[name]
        except KeyError:
            return default

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def names(self) -> list[str]:
        return sorted(self._cfg_by_name)
