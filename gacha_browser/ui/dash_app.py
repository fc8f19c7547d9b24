from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from gacha_browser.config.loader import load_global_config
from gacha_browser.services.dataset_service import DatasetService
from gacha_browser.ui.layout.build_layout import build_layout
from gacha_browser.ui.callbacks.callbacks_load import register_load_callbacks
from gacha_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from gacha_browser.ui.callbacks.callbacks_render import register_render_callbacks
from gacha_browser.ui.callbacks.callbacks_io import register_io_callbacks
from gacha_browser.ui.callbacks.callbacks_theme import register_theme_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    # 1) Load Config
    global_config = load_global_config(Path(config_root))

    # 2) Dataset service (fetches lazily on first page load)
    dataset_service = DatasetService(
        global_config.data_source,
        location_columns=global_config.location_columns,
        location_label=global_config.location_label,
        timeout=global_config.request_timeout,
    )

    # 3) App Context
    ctx = AppConfig(
        global_config=global_config,
        dataset_service=dataset_service,
    )

    # Resolve assets relative to this file so styles.css / theme.js are
    # found regardless of the working directory
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_load_callbacks(app, ctx)
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)
    register_theme_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"data_source": global_config.data_source, "title": global_config.ui_title},
    )
    return app
