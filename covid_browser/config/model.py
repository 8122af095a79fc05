from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

LAYOUT_WIDE = "wide"
LAYOUT_LONG = "long"


@dataclass(frozen=True)
class ColumnMapping:
    """
    Source column names for the semantic columns used internally by the app.

    For a wide table only `county` names a real source column; `date` and
    `cases` are the names given to the melted header/value columns.
    """
    county: str = "county"
    date: str = "date"
    cases: str = "cases"


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single dataset.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Dataset {self.index}")

    @property
    def group(self) -> str:
        return self.raw.get("group", "Default")

    @property
    def source(self) -> str:
        return str(self.raw["source"])

    @property
    def is_remote(self) -> bool:
        return self.source.lower().startswith(("http://", "https://"))

    @property
    def layout(self) -> str:
        return str(self.raw.get("layout", LAYOUT_LONG)).lower()

    @property
    def columns(self) -> ColumnMapping:
        return ColumnMapping(**self.raw.get("columns", {}))

    @property
    def id_columns(self) -> List[str]:
        return list(self.raw.get("id_columns", []))

    @property
    def date_format(self) -> Optional[str]:
        return self.raw.get("date_format")

    @property
    def cumulative(self) -> bool:
        return bool(self.raw.get("cumulative", False))

    @property
    def default_view(self) -> Optional[str]:
        return self.raw.get("default_view")

    @property
    def default_mode(self) -> Optional[str]:
        return self.raw.get("default_mode")

    @property
    def default_counties(self) -> List[str]:
        return [str(c) for c in self.raw.get("default_counties", [])]

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    ui_title: str
    subtitle: str = "County case counts explorer"
    default_dataset: Optional[str] = None
    datasets: List[DatasetConfig] = field(default_factory=list)
    data_root: Optional[Path] = None
