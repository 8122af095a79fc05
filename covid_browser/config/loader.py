from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from covid_browser.config.model import DatasetConfig, GlobalConfig
from covid_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "COVID-19 County Browser"
DEFAULT_SUBTITLE = "County case counts explorer"


def _dataset_configs(datasets_dir: Path) -> List[DatasetConfig]:
    """
    Parse every datasets/*.json file, in file-name order.

    Unreadable files and entries without a 'source' are logged and left out.
    """
    if not datasets_dir.is_dir():
        logger.warning("No datasets directory", extra={"datasets_dir": str(datasets_dir)})
        return []

    paths = sorted(datasets_dir.glob("*.json"))
    if not paths:
        logger.warning("Datasets directory has no .json files", extra={"datasets_dir": str(datasets_dir)})

    configs: List[DatasetConfig] = []
    for idx, path in enumerate(paths):
        try:
            raw = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Skipping unreadable dataset config", extra={"file": path.name, "error": str(e)})
            continue

        if not isinstance(raw, dict) or "source" not in raw:
            logger.error("Skipping dataset config without 'source'", extra={"file": path.name})
            continue

        configs.append(DatasetConfig.from_raw(raw, source_path=path, index=idx))
    return configs


def _resolve_data_root(root: Path, value: Any) -> Optional[Path]:
    # relative data_root is taken from the config directory, not the cwd
    if value is None:
        return None
    path = Path(value)
    return path if path.is_absolute() else (root / path).resolve()


def load_global_config(root: Path) -> GlobalConfig:
    """
    Read a config directory laid out as:

        root/
            global.json
            datasets/
                mn_counties.json
                ...

    global.json keys (all optional): ui_title, subtitle, default_dataset, data_root.
    Each datasets/*.json becomes one DatasetConfig; a broken file only costs
    that one dataset.

    :param root: the config directory
    :return: the parsed GlobalConfig
    :raises FileNotFoundError: when root/global.json is missing
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"No global.json in {root}")

    raw_global = json.loads(global_path.read_text())

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", DEFAULT_TITLE),
        subtitle=raw_global.get("subtitle", DEFAULT_SUBTITLE),
        default_dataset=raw_global.get("default_dataset"),
        datasets=_dataset_configs(root / "datasets"),
        data_root=_resolve_data_root(root, raw_global.get("data_root")),
    )


def load_dataset_registry(root: Path) -> Tuple[GlobalConfig, Dict[str, DatasetConfig]]:
    """
    Config only, no data: the GlobalConfig plus dataset name -> DatasetConfig.
    Tables are read later, on first use, by the dataset service.

    :raises ConfigError: if two dataset files share a name.
    """
    global_config = load_global_config(root)

    cfg_by_name: Dict[str, DatasetConfig] = {}
    for ds_cfg in global_config.datasets:
        cfg_by_name.setdefault(ds_cfg.name, ds_cfg)

    if len(cfg_by_name) != len(global_config.datasets):
        names = [c.name for c in global_config.datasets]
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise ConfigError(f"Duplicate dataset names in config: {dupes}")

    if not cfg_by_name:
        logger.warning("No datasets configured", extra={"config_root": str(root)})

    logger.info(
        "Dataset registry loaded",
        extra={"config_root": str(root), "dataset_names": sorted(cfg_by_name)},
    )
    return global_config, cfg_by_name
