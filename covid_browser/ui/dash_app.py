from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from covid_browser.config.loader import load_dataset_registry
from covid_browser.core.view_registry import ViewRegistry
from covid_browser.services.dataset_service import DatasetManager
from covid_browser.ui.config import AppConfig
from covid_browser.ui.layout.build_layout import build_layout
from covid_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from covid_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from covid_browser.ui.callbacks.callbacks_io import register_io_callbacks
from covid_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from covid_browser.views import (
        CasesScatterView,
        CountyTotalsView,
        CasesTableView,
    )

    registry = ViewRegistry()
    registry.register(CasesScatterView)
    registry.register(CountyTotalsView)
    registry.register(CasesTableView)
    return registry


def build_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    """
    Load config, wire the lazy dataset service and the view registry, and
    materialise the default dataset (the app has nothing to show without it).
    """
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_name = load_dataset_registry(config_root)
    if not cfg_by_name:
        raise RuntimeError(f"No dataset configs were loaded from {config_root}")

    # 2) Service layer: one shared, read-only Dataset per config
    dataset_manager = DatasetManager(cfg_by_name, data_root=global_config.data_root)
    registry = _build_view_registry()

    # 3) Choose Default Dataset
    default_name = global_config.default_dataset
    if default_name not in cfg_by_name:
        if default_name is not None:
            logger.warning(
                "Configured default dataset not found; falling back to first",
                extra={"default_dataset": default_name},
            )
        default_name = sorted(cfg_by_name.keys())[0]

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset_names=dataset_manager.names(),
        dataset_by_name=dataset_manager,
        default_dataset=dataset_manager[default_name],
        registry=registry,
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_config(config_root)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = ctx.global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={
            "config_root": str(config_root),
            "datasets": ctx.dataset_names,
            "default_dataset": ctx.default_dataset.name,
        },
    )
    return app
