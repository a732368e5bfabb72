from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_admin.ui.ids import IDs, sort_header_id, sort_icon_id
from catalog_admin.ui.render import SORTABLE_COLUMNS, sort_icon_class


def _sort_header(field: str, label: str) -> html.Th:
    return html.Th(
        [
            html.Span(label, className="me-1"),
            html.I(id=sort_icon_id(field), className=sort_icon_class(field, None)),
        ],
        id=sort_header_id(field),
        n_clicks=0,
        className="sortable",
    )


def build_table_panel() -> dbc.Card:
    header = html.Thead(
        html.Tr([_sort_header(field, label) for field, label in SORTABLE_COLUMNS] + [html.Th("Image")])
    )

    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Products"), className="p-2"),
            dbc.CardBody(
                [
                    dbc.Table(
                        [header, html.Tbody(id=IDs.Control.TABLE_BODY)],
                        hover=True,
                        striped=True,
                        responsive=True,
                        className="align-middle mb-2",
                    ),
                    html.Nav(
                        html.Ul(id=IDs.Control.PAGINATION, className="pagination justify-content-center mb-0"),
                    ),
                ],
            ),
        ],
        className="mt-3 cad-maincard",
    )
