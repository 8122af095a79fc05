from pathlib import Path

import pytest
from dash import Dash

from covid_browser.ui.dash_app import build_app_config, create_dash_app

CONFIG_ROOT = Path(__file__).parents[3] / "config"


@pytest.fixture(autouse=True)
def _no_data_root_env(monkeypatch):
    monkeypatch.delenv("COVID_BROWSER_DATA_ROOT", raising=False)


def test_build_app_config_from_repo_config():
    ctx = build_app_config(CONFIG_ROOT)

    ds = ctx.default_dataset
    assert ds.name == "Minnesota counties"
    assert ctx.dataset_names == ["Minnesota counties"]
    assert len(ds.counties) == 7
    assert len(ds) == 672
    assert ds.years == [2020, 2021]
    assert [cls.id for cls in ctx.registry.all_classes()] == [
        "cases_scatter",
        "county_totals",
        "cases_table",
    ]


def test_create_dash_app():
    app = create_dash_app(CONFIG_ROOT)

    assert isinstance(app, Dash)
    assert app.title == "COVID-19 County Browser"
    assert app.layout is not None


def test_missing_datasets_raise(tmp_path):
    (tmp_path / "global.json").write_text("{}")

    with pytest.raises(RuntimeError, match="No dataset configs"):
        build_app_config(tmp_path)
