from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from covid_browser.config.model import GlobalConfig
from covid_browser.core.dataset import Dataset
from covid_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config root, the (lazily loaded,
    read-only) datasets and the view registry. This is passed into layout +
    callback registration functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset_names: List[str] = field(default_factory=list)
    dataset_by_name: Mapping[str, Dataset] = field(default_factory=dict)
    default_dataset: Optional[Dataset] = None

    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.default_dataset is None:
            raise RuntimeError("AppConfig.default_dataset must be initialized.")

    def view_label(self, view_id: str | None) -> str:
        if self.registry is not None and view_id:
            cls = self.registry.get_class(view_id)
            if cls is not None:
                return cls.label
        return view_id or "?"
