from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_admin.config.model import GlobalConfig
from catalog_admin.ui.ids import IDs


def _field(label: str, component) -> html.Div:
    return html.Div([dbc.Label(label), component], className="mb-2")


def build_detail_modal(global_config: GlobalConfig) -> dbc.Modal:
    """
    Detail / edit modal.

    Fields start disabled (view mode); the Edit button unlocks them and swaps
    itself for the Save button.
    """
    form = html.Div(
        [
            _field("ID", dbc.Input(id=IDs.Control.EDIT_ID, disabled=True)),
            _field("Title", dbc.Input(id=IDs.Control.EDIT_TITLE, disabled=True)),
            _field("Price", dbc.Input(id=IDs.Control.EDIT_PRICE, type="number", disabled=True)),
            _field("Description", dbc.Textarea(id=IDs.Control.EDIT_DESC, rows=4, disabled=True)),
        ]
    )

    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Product details"), close_button=True),
            dbc.ModalBody(
                dbc.Row(
                    [
                        dbc.Col(
                            html.Img(
                                id=IDs.Control.DETAIL_IMG,
                                src=global_config.placeholder_image,
                                className="img-fluid rounded",
                                alt="product",
                            ),
                            md=4,
                        ),
                        dbc.Col(form, md=8),
                    ]
                )
            ),
            dbc.ModalFooter(
                [
                    dbc.Button("Edit", id=IDs.Control.EDIT_ENABLE_BTN, color="warning"),
                    dbc.Button("Save changes", id=IDs.Control.EDIT_SAVE_BTN, color="primary", className="d-none"),
                    dbc.Button("Close", id=IDs.Control.DETAIL_CLOSE_BTN, color="secondary"),
                ]
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="lg",
    )


def build_create_modal() -> dbc.Modal:
    form = html.Div(
        [
            _field("Title", dbc.Input(id=IDs.Control.CREATE_TITLE, value="")),
            _field("Price", dbc.Input(id=IDs.Control.CREATE_PRICE, type="number", value="")),
            _field("Description", dbc.Textarea(id=IDs.Control.CREATE_DESC, rows=3, value="")),
            _field("Category ID", dbc.Input(id=IDs.Control.CREATE_CAT_ID, type="number", value="")),
            _field("Image URL", dbc.Input(id=IDs.Control.CREATE_IMG, type="url", value="")),
        ]
    )

    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("New product"), close_button=True),
            dbc.ModalBody(form),
            dbc.ModalFooter(
                [
                    dbc.Button("Create", id=IDs.Control.CREATE_SUBMIT_BTN, color="primary"),
                    dbc.Button("Cancel", id=IDs.Control.CREATE_CANCEL_BTN, color="secondary"),
                ]
            ),
        ],
        id=IDs.Control.CREATE_MODAL,
        is_open=False,
    )
