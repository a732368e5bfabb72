from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from catalog_admin.ui.config import AppConfig
from catalog_admin.ui.ids import IDs
from catalog_admin.ui.layout.build_modals import build_create_modal, build_detail_modal
from catalog_admin.ui.layout.build_navbar import build_navbar
from catalog_admin.ui.layout.build_table_panel import build_table_panel
from catalog_admin.ui.layout.build_toolbar import build_toolbar


def build_layout(ctx: AppConfig):
    global_config = ctx.global_config

    return dbc.Container(
        fluid=True,
        className="cad-root",
        children=[
            build_navbar(global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.EDIT_SESSION, storage_type="memory"),

            build_toolbar(global_config),
            dbc.Alert(
                id=IDs.Control.NOTICE,
                is_open=False,
                dismissable=True,
                duration=6000,
                className="mt-3 mb-0",
            ),
            build_table_panel(),
            build_detail_modal(global_config),
            build_create_modal(),
        ],
    )
