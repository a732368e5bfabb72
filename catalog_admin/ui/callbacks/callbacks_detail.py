from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Tuple

import dash
from dash import ALL, Input, Output, State, exceptions

from catalog_admin.core.edit_session import EditSession
from catalog_admin.ui.callbacks.callbacks_utils import build_dashboard, clicked_id, notice_outputs
from catalog_admin.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = "d-none"


def _form_outputs(session: EditSession, placeholder: str) -> Tuple[Any, ...]:
    """(id, title, price, description, image src) shown in the modal."""
    form = session.form
    if form is None:
        return "", "", "", "", placeholder
    return form.id, form.title, form.price, form.description, form.image or placeholder


def _mode_outputs(session: EditSession) -> Tuple[Any, ...]:
    """(title/price/desc disabled flags, edit button class, save button class)."""
    locked = not session.is_editing
    return (
        locked,
        locked,
        locked,
        HIDDEN if session.is_editing else "",
        "" if session.is_editing else HIDDEN,
    )


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    placeholder = ctx.global_config.placeholder_image

    @app.callback(
        Output(IDs.Store.EDIT_SESSION, "data"),
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.EDIT_ID, "value"),
        Output(IDs.Control.EDIT_TITLE, "value"),
        Output(IDs.Control.EDIT_PRICE, "value"),
        Output(IDs.Control.EDIT_DESC, "value"),
        Output(IDs.Control.DETAIL_IMG, "src"),
        Output(IDs.Control.EDIT_TITLE, "disabled"),
        Output(IDs.Control.EDIT_PRICE, "disabled"),
        Output(IDs.Control.EDIT_DESC, "disabled"),
        Output(IDs.Control.EDIT_ENABLE_BTN, "className"),
        Output(IDs.Control.EDIT_SAVE_BTN, "className"),
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "children", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "is_open", allow_duplicate=True),
        Output(IDs.Control.NOTICE, "color", allow_duplicate=True),
        Input({"type": IDs.Pattern.PRODUCT_ROW, "index": ALL}, "n_clicks"),
        Input(IDs.Control.EDIT_ENABLE_BTN, "n_clicks"),
        Input(IDs.Control.EDIT_SAVE_BTN, "n_clicks"),
        Input(IDs.Control.DETAIL_CLOSE_BTN, "n_clicks"),
        Input(IDs.Control.DETAIL_MODAL, "is_open"),
        State(IDs.Store.EDIT_SESSION, "data"),
        State(IDs.Store.VIEW_STATE, "data"),
        State(IDs.Control.EDIT_TITLE, "value"),
        State(IDs.Control.EDIT_PRICE, "value"),
        State(IDs.Control.EDIT_DESC, "value"),
        prevent_initial_call=True,
    )
    def handle_detail(_row_clicks, _edit, _save, _close, is_open, session_data, view_data, title, price, desc):
        triggered = dash.callback_context.triggered_id
        dashboard = build_dashboard(ctx, view_data, session_data)
        no_view_change = dash.no_update

        # Modal dismissed from the header "x", the backdrop or Escape
        if triggered == IDs.Control.DETAIL_MODAL:
            if is_open:
                raise exceptions.PreventUpdate
            result = dashboard.dispatch("close_detail")
            refresh_form = True

        elif triggered == IDs.Control.DETAIL_CLOSE_BTN:
            result = dashboard.dispatch("close_detail")
            refresh_form = True

        elif triggered == IDs.Control.EDIT_ENABLE_BTN:
            result = dashboard.dispatch("begin_edit")
            # Unlock the fields without touching what they show
            refresh_form = False

        elif triggered == IDs.Control.EDIT_SAVE_BTN:
            result = dashboard.dispatch("save_edit", title=title, price=price, description=desc)
            # On failure the session stays in editing; keep the user's input
            refresh_form = result.ok
            if result.ok:
                no_view_change = dashboard.view.to_dict()

        else:
            target = clicked_id()
            if target is None or target.get("type") != IDs.Pattern.PRODUCT_ROW:
                raise exceptions.PreventUpdate
            result = dashboard.dispatch("open_detail", record_id=target["index"])
            if not result.ok and result.notice is None:
                # Unknown id: leave the modal closed
                raise exceptions.PreventUpdate
            refresh_form = True

        session = dashboard.session
        form = _form_outputs(session, placeholder) if refresh_form else (dash.no_update,) * 5

        return (
            session.to_dict(),
            session.is_open,
            *form,
            *_mode_outputs(session),
            no_view_change,
            *notice_outputs(result.notice),
        )
