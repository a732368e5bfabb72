from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from catalog_admin.ui.callbacks.callbacks_utils import build_dashboard, notice_outputs
from catalog_admin.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_admin.ui.config import AppConfig


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Output(IDs.Control.NOTICE, "children", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "is_open", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "color", allow_duplicate=True),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def export_visible_products(n_clicks, view_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        result = build_dashboard(ctx, view_data).dispatch("export")
        if result.export is None:
            return (dash.no_update, *notice_outputs(result.notice))

        export = result.export
        return (
            dcc.send_string(export.content, export.filename, type=export.mime_type),
            *notice_outputs(None),
        )
