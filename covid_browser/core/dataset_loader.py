from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from covid_browser.config.model import LAYOUT_LONG, LAYOUT_WIDE, DatasetConfig
from covid_browser.core.dataset import Dataset
from covid_browser.core.exceptions import DatasetConfigError, DatasetSchemaError
from covid_browser.validation.dataset_validation import validate_frame
from covid_browser.validation.errors import ValidationError

logger = logging.getLogger(__name__)


def resolve_source(cfg: DatasetConfig, data_root: Optional[Path] = None) -> str:
    """
    Turn cfg.source into something pandas can read.

    URLs are returned untouched. Relative paths are tried against, in order:
    COVID_BROWSER_DATA_ROOT, the global data_root, the dataset config's own directory.
    """
    if cfg.is_remote:
        return cfg.source

    path = Path(cfg.source)
    if not path.is_absolute():
        candidates = []
        env_root = os.environ.get("COVID_BROWSER_DATA_ROOT")
        if env_root:
            candidates.append(Path(env_root) / path)
        if data_root is not None:
            candidates.append(Path(data_root) / path)
        candidates.append(cfg.source_path.parent / path)

        path = next((c for c in candidates if c.is_file()), candidates[0])

    if not path.is_file():
        raise DatasetConfigError(f"Dataset '{cfg.name}': source file not found at {path}.")

    return str(path)


def _read_source(cfg: DatasetConfig, source: str) -> pd.DataFrame:
    try:
        return pd.read_csv(source)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetConfigError(f"Dataset '{cfg.name}': could not read {source}: {e}") from e


def _reshape_wide(raw: pd.DataFrame, cfg: DatasetConfig) -> pd.DataFrame:
    """
    One row per county, one column per date -> one row per (county, date).

    Output is county-major: every date of the first county, then the next county.
    """
    county_col = cfg.columns.county
    if county_col not in raw.columns:
        raise DatasetConfigError(
            f"Dataset '{cfg.name}': county column '{county_col}' not found in source"
        )

    missing_ids = [c for c in cfg.id_columns if c not in raw.columns]
    if missing_ids:
        raise DatasetConfigError(f"Dataset '{cfg.name}': id_columns {missing_ids} not found in source")

    id_cols = [county_col] + [c for c in cfg.id_columns if c != county_col]
    value_cols = [c for c in raw.columns if c not in id_cols]
    if not value_cols:
        raise DatasetConfigError(f"Dataset '{cfg.name}': wide layout has no date columns")

    raw = raw.reset_index(drop=True)
    long_df = raw.melt(
        id_vars=[county_col],
        value_vars=value_cols,
        var_name="date",
        value_name="cases",
    )

    # melt is date-major; restore source row order with a stable sort
    long_df["_row"] = np.tile(np.arange(len(raw)), len(value_cols))
    long_df = long_df.sort_values("_row", kind="stable").drop(columns="_row")

    return long_df.rename(columns={county_col: "county"}).reset_index(drop=True)


def _reshape_long(raw: pd.DataFrame, cfg: DatasetConfig) -> pd.DataFrame:
    cols = cfg.columns
    mapping = {cols.county: "county", cols.date: "date", cols.cases: "cases"}

    missing = [src for src in mapping if src not in raw.columns]
    if missing:
        raise DatasetConfigError(f"Dataset '{cfg.name}': column(s) {missing} not found in source")

    return raw.loc[:, list(mapping)].rename(columns=mapping).reset_index(drop=True)


def _coerce_types(df: pd.DataFrame, cfg: DatasetConfig) -> pd.DataFrame:
    df = df.copy()
    df["county"] = df["county"].astype("string").str.strip()
    df["date"] = pd.to_datetime(df["date"], format=cfg.date_format, errors="coerce")

    bad = (
        df["county"].isna()
        | df["county"].eq("").fillna(True)
        | df["date"].isna()
    ).to_numpy(dtype=bool)
    n_bad = int(bad.sum())
    if n_bad:
        logger.warning(
            "Dropping rows with missing county or unparseable date",
            extra={"dataset": cfg.name, "n_dropped": n_bad},
        )
        df = df.loc[~bad].copy()

    df["county"] = df["county"].astype(str)
    df["cases"] = pd.to_numeric(df["cases"], errors="coerce").fillna(0).round().astype("int64")
    return df.reset_index(drop=True)


def _cumulative_to_daily(df: pd.DataFrame, cfg: DatasetConfig) -> pd.DataFrame:
    """
    Running totals -> new cases per day, per county. The first value of each
    county is kept as-is; downward corrections are clipped to 0.
    """
    df = df.copy()
    ordered = df.sort_values("date", kind="stable")
    daily = ordered.groupby("county", sort=False)["cases"].diff()
    daily = daily.fillna(ordered["cases"])

    negative = daily < 0
    if negative.any():
        logger.warning(
            "Clipping negative daily counts derived from cumulative totals",
            extra={"dataset": cfg.name, "n_clipped": int(negative.sum())},
        )
        daily = daily.clip(lower=0)

    df["cases"] = daily.reindex(df.index).astype("int64")
    return df


def _load_frame(cfg: DatasetConfig, source: str) -> pd.DataFrame:
    raw = _read_source(cfg, source)

    if cfg.layout == LAYOUT_WIDE:
        df = _reshape_wide(raw, cfg)
    elif cfg.layout == LAYOUT_LONG:
        df = _reshape_long(raw, cfg)
    else:
        raise DatasetConfigError(f"Dataset '{cfg.name}': unknown layout '{cfg.layout}'")

    df = _coerce_types(df, cfg)

    if cfg.cumulative:
        df = _cumulative_to_daily(df, cfg)

    try:
        validate_frame(df)
    except ValidationError as e:
        logger.error(
            "Loaded table failed validation",
            extra={"dataset": cfg.name, "issues": [i.code for i in e.issues]},
        )
        raise DatasetSchemaError(f"Dataset '{cfg.name}': {e}") from e

    return df


def frame_from_config(cfg: DatasetConfig, data_root: Optional[Path] = None) -> pd.DataFrame:
    """
    Read + reshape + coerce the configured source into a validated
    long-format frame (county, date, cases).
    """
    return _load_frame(cfg, resolve_source(cfg, data_root))


def from_config(cfg: DatasetConfig, data_root: Optional[Path] = None) -> Dataset:
    """
    Materialise a Dataset from a DatasetConfig.
    """
    source = resolve_source(cfg, data_root)
    df = _load_frame(cfg, source)

    ds = Dataset(
        name=cfg.name,
        frame=df,
        group=cfg.group,
        source=cfg.source,
        file_path=None if cfg.is_remote else Path(source),
        default_view=cfg.default_view,
        default_mode=cfg.default_mode,
        default_counties=cfg.default_counties,
    )

    logger.info(
        "Dataset loaded",
        extra={
            "dataset": cfg.name,
            "n_rows": len(ds),
            "n_counties": len(ds.valid_sets().counties),
        },
    )
    return ds
