from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from catalog_admin.ui.callbacks.callbacks_utils import build_dashboard, notice_outputs
from catalog_admin.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)

N_FORM_FIELDS = 5


def register_create_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.CREATE_MODAL, "is_open"),
        Output(IDs.Control.CREATE_TITLE, "value"),
        Output(IDs.Control.CREATE_PRICE, "value"),
        Output(IDs.Control.CREATE_DESC, "value"),
        Output(IDs.Control.CREATE_CAT_ID, "value"),
        Output(IDs.Control.CREATE_IMG, "value"),
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "children", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "is_open", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "color", allow_duplicate=True),
        Input(IDs.Control.NEW_PRODUCT_BTN, "n_clicks"),
        Input(IDs.Control.CREATE_SUBMIT_BTN, "n_clicks"),
        Input(IDs.Control.CREATE_CANCEL_BTN, "n_clicks"),
        State(IDs.Control.CREATE_TITLE, "value"),
        State(IDs.Control.CREATE_PRICE, "value"),
        State(IDs.Control.CREATE_DESC, "value"),
        State(IDs.Control.CREATE_CAT_ID, "value"),
        State(IDs.Control.CREATE_IMG, "value"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def handle_create(_new, _submit, _cancel, title, price, desc, cat_id, image, view_data):
        triggered = dash.callback_context.triggered_id
        keep_form = (dash.no_update,) * N_FORM_FIELDS
        no_notice = (dash.no_update,) * 3

        if triggered == IDs.Control.NEW_PRODUCT_BTN:
            return (True, *keep_form, dash.no_update, *no_notice)

        if triggered == IDs.Control.CREATE_CANCEL_BTN:
            return (False, *keep_form, dash.no_update, *no_notice)

        if triggered != IDs.Control.CREATE_SUBMIT_BTN:
            raise exceptions.PreventUpdate

        dashboard = build_dashboard(ctx, view_data)
        result = dashboard.dispatch(
            "create",
            title=title,
            price=price,
            description=desc,
            category_id=cat_id,
            image=image,
        )

        if not result.ok:
            # Create failed: stay open so the user can fix the form
            return (True, *keep_form, dash.no_update, *notice_outputs(result.notice))

        cleared = ("",) * N_FORM_FIELDS
        return (False, *cleared, dashboard.view.to_dict(), *notice_outputs(result.notice))
