import json
from pathlib import Path

import pytest

from covid_browser.config.loader import load_dataset_registry, load_global_config
from covid_browser.config.model import LAYOUT_LONG, LAYOUT_WIDE
from covid_browser.core.exceptions import ConfigError


def _make_config_dir(tmp_path: Path, global_json: dict, datasets: dict[str, object]) -> Path:
    """
    root/
      global.json
      datasets/
        <file name>.json  (value written as JSON, or verbatim if it is a str)
    """
    config_root = tmp_path / "config"
    datasets_dir = config_root / "datasets"
    datasets_dir.mkdir(parents=True)

    (config_root / "global.json").write_text(json.dumps(global_json))
    for file_name, content in datasets.items():
        text = content if isinstance(content, str) else json.dumps(content)
        (datasets_dir / file_name).write_text(text)
    return config_root


def test_load_global_config_from_config_dir(tmp_path):
    config_root = _make_config_dir(
        tmp_path,
        {"ui_title": "Test Browser", "default_dataset": "Wide", "data_root": "../data"},
        {
            "a_wide.json": {
                "name": "Wide",
                "group": "MN",
                "source": "wide.csv",
                "layout": "wide",
                "columns": {"county": "County"},
                "id_columns": ["FIPS"],
                "cumulative": True,
            },
            "b_long.json": {"name": "Long", "source": "long.csv"},
        },
    )

    global_config = load_global_config(config_root)

    assert global_config.ui_title == "Test Browser"
    assert global_config.subtitle == "County case counts explorer"
    assert global_config.default_dataset == "Wide"
    assert global_config.data_root == (tmp_path / "data").resolve()

    wide, long = global_config.datasets
    assert wide.layout == LAYOUT_WIDE
    assert wide.columns.county == "County"
    assert wide.columns.date == "date"
    assert wide.id_columns == ["FIPS"]
    assert wide.cumulative is True
    assert long.layout == LAYOUT_LONG
    assert long.cumulative is False
    assert long.date_format is None
    assert long.source_path == config_root / "datasets" / "b_long.json"


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_broken_dataset_files_are_skipped(tmp_path):
    config_root = _make_config_dir(
        tmp_path,
        {},
        {
            "broken.json": "{not json",
            "no_source.json": {"name": "NoSource"},
            "ok.json": {"name": "Ok", "source": "ok.csv"},
        },
    )

    global_config, cfg_by_name = load_dataset_registry(config_root)

    assert global_config.ui_title == "COVID-19 County Browser"
    assert global_config.data_root is None
    assert list(cfg_by_name) == ["Ok"]


def test_duplicate_dataset_names_raise(tmp_path):
    config_root = _make_config_dir(
        tmp_path,
        {},
        {
            "a.json": {"name": "Same", "source": "a.csv"},
            "b.json": {"name": "Same", "source": "b.csv"},
        },
    )

    with pytest.raises(ConfigError, match="Same"):
        load_dataset_registry(config_root)


def test_unnamed_dataset_gets_positional_name(tmp_path):
    config_root = _make_config_dir(tmp_path, {}, {"x.json": {"source": "x.csv"}})

    _, cfg_by_name = load_dataset_registry(config_root)

    assert list(cfg_by_name) == ["Dataset 0"]
    assert cfg_by_name["Dataset 0"].group == "Default"
