from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from catalog_admin.config.loader import load_global_config
from catalog_admin.services.catalog_client import CatalogClient
from catalog_admin.ui.layout.build_layout import build_layout
from catalog_admin.ui.callbacks.callbacks_catalog import register_catalog_callbacks
from catalog_admin.ui.callbacks.callbacks_detail import register_detail_callbacks
from catalog_admin.ui.callbacks.callbacks_create import register_create_callbacks
from catalog_admin.ui.callbacks.callbacks_export import register_export_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config"), client: CatalogClient | None = None) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Service Layer
    if client is None:
        client = CatalogClient(global_config.api_base_url)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        client=client,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY, dbc.icons.FONT_AWESOME],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_catalog_callbacks(app, ctx)
    register_detail_callbacks(app, ctx)
    register_create_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    logger.info("Dash app created", extra={"api": client.collection_url})
    return app
