from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import dash

from catalog_admin.core.edit_session import EditSession
from catalog_admin.core.view_state import ViewState
from catalog_admin.services.dashboard_service import CatalogDashboard, Notice
from catalog_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def try_parse_view_state(data: object, default_page_size: int) -> ViewState:
    if not isinstance(data, dict) or not data:
        return ViewState(page_size=default_page_size)
    try:
        return ViewState.from_dict(data)
    except Exception:
        logger.exception("Invalid view-state: %r", data)
        return ViewState(page_size=default_page_size)


def build_dashboard(ctx: AppConfig, view_data: object, session_data: object = None) -> CatalogDashboard:
    view = try_parse_view_state(view_data, ctx.global_config.default_page_size)
    return CatalogDashboard(ctx.client, view=view, session=EditSession.from_dict(session_data))


def clicked_id() -> Optional[Any]:
    """
    Id of the component whose click fired the callback, or None.

    Pattern-matched links/rows are re-created on every render and fire the
    callback with n_clicks=0; those are not clicks.
    """
    cb = dash.callback_context
    if not cb.triggered:
        return None
    if not cb.triggered[0].get("value"):
        return None
    return cb.triggered_id


def notice_outputs(notice: Optional[Notice]) -> Tuple[Any, Any, Any]:
    """(children, is_open, color) for the notice Alert."""
    if notice is None:
        return dash.no_update, dash.no_update, dash.no_update
    return notice.message, True, notice.level
