from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_admin.config.model import GlobalConfig
from catalog_admin.ui.ids import IDs


def build_toolbar(global_config: GlobalConfig) -> dbc.Row:
    page_size_options = [
        {"label": f"{n} / page", "value": str(n)} for n in global_config.page_size_options
    ]

    return dbc.Row(
        [
            dbc.Col(
                dbc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="search",
                    placeholder="Search by title...",
                    value="",
                ),
                md=5,
            ),
            dbc.Col(
                dbc.Select(
                    id=IDs.Control.PAGE_SIZE_SELECT,
                    options=page_size_options,
                    value=str(global_config.default_page_size),
                ),
                md=2,
            ),
            dbc.Col(
                html.Div(
                    [
                        dbc.Button(
                            [html.I(className="fa-solid fa-rotate me-1"), "Refresh"],
                            id=IDs.Control.REFRESH_BTN,
                            color="secondary",
                            outline=True,
                            className="me-2",
                        ),
                        dbc.Button(
                            [html.I(className="fa-solid fa-plus me-1"), "New product"],
                            id=IDs.Control.NEW_PRODUCT_BTN,
                            color="primary",
                            className="me-2",
                        ),
                        dbc.Button(
                            [html.I(className="fa-solid fa-file-csv me-1"), "Export CSV"],
                            id=IDs.Control.EXPORT_BTN,
                            color="success",
                        ),
                        dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                    ],
                    className="d-flex justify-content-end",
                ),
                md=5,
            ),
        ],
        className="g-2 align-items-center mt-3",
    )
