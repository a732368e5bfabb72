from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions

from catalog_admin.ui.callbacks.callbacks_utils import build_dashboard, clicked_id, notice_outputs
from catalog_admin.ui.ids import IDs
from catalog_admin.ui.render import pagination_items, sort_icon_classes, table_rows

if TYPE_CHECKING:
    from catalog_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_catalog_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # 1. Load / reload the catalog from the API
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.NOTICE, "children"),
        Output(IDs.Control.NOTICE, "is_open"),
        Output(IDs.Control.NOTICE, "color"),
        Input(IDs.Control.REFRESH_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
    )
    def load_catalog(_n_clicks, view_data):
        dashboard = build_dashboard(ctx, view_data)
        result = dashboard.dispatch("reload")
        if not result.ok:
            # Keep whatever was on screen; the notice says what happened
            return (dash.no_update, *notice_outputs(result.notice))
        return (dashboard.view.to_dict(), *notice_outputs(result.notice))

    # ---------------------------------------------------------
    # 2. List commands: search / page size / sort / paginate
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_LINK, "role": ALL, "index": ALL}, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def handle_list_command(keyword, page_size, _sort_clicks, _page_clicks, view_data):
        triggered = dash.callback_context.triggered_id
        dashboard = build_dashboard(ctx, view_data)

        if triggered == IDs.Control.SEARCH_INPUT:
            result = dashboard.dispatch("search", keyword=keyword or "")
        elif triggered == IDs.Control.PAGE_SIZE_SELECT:
            try:
                size = int(page_size)
            except (TypeError, ValueError):
                raise exceptions.PreventUpdate
            result = dashboard.dispatch("set_page_size", size=size)
        else:
            target = clicked_id()
            if target is None:
                raise exceptions.PreventUpdate
            if target["type"] == IDs.Pattern.SORT_HEADER:
                result = dashboard.dispatch("sort", field=target["index"])
            elif target["type"] == IDs.Pattern.PAGE_LINK:
                result = dashboard.dispatch("go_to_page", page=int(target["index"]))
            else:
                raise exceptions.PreventUpdate

        if not result.ok:
            raise exceptions.PreventUpdate
        return dashboard.view.to_dict()

    # ---------------------------------------------------------
    # 3. Render: view state -> table, pagination, sort icons
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.PAGINATION, "children"),
        Output({"type": IDs.Pattern.SORT_ICON, "index": ALL}, "className"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def render_catalog(view_data):
        view = build_dashboard(ctx, view_data).view
        logger.debug(
            "render_table",
            extra={"page": view.page, "page_size": view.page_size, "n_filtered": len(view.filtered_set)},
        )
        return (
            table_rows(view.page_slice(), ctx.global_config.placeholder_thumbnail),
            pagination_items(view.page, view.page_count()),
            sort_icon_classes(view.sort),
        )
