"""
Projections from ViewState to Dash components.

Nothing in here holds state: every function takes what it needs and returns
components (or plain values) for the render callback to hand back to Dash.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from dash import html

from catalog_admin.core.record import Record
from catalog_admin.core.view_state import ASC, SortDirective
from catalog_admin.ui.ids import page_link_id, product_row_id

# (field, header label); fields double as sort keys
SORTABLE_COLUMNS: List[Tuple[str, str]] = [
    ("id", "ID"),
    ("title", "Title"),
    ("price", "Price"),
    ("category", "Category"),
]
N_COLUMNS = len(SORTABLE_COLUMNS) + 1  # + image

NO_RESULTS_TEXT = "No products found"
PAGE_WINDOW = 2


def image_src(record: Record, placeholder: str) -> str:
    return record.first_image or placeholder


def format_price(price) -> str:
    if isinstance(price, float) and price.is_integer():
        price = int(price)
    return f"${price}"


def table_row(record: Record, placeholder: str) -> html.Tr:
    return html.Tr(
        [
            html.Td(record.id),
            html.Td(record.title),
            html.Td(format_price(record.price)),
            html.Td(record.category_name or "N/A"),
            html.Td(html.Img(src=image_src(record, placeholder), className="product-img", alt="img")),
        ],
        id=product_row_id(record.id),
        n_clicks=0,
        title=f"Description: {record.description}",
        className="product-row",
    )


def table_rows(records: Sequence[Record], placeholder: str) -> List[html.Tr]:
    """Rows for the current page, or a single "no results" row."""
    if not records:
        return [
            html.Tr(
                html.Td(NO_RESULTS_TEXT, colSpan=N_COLUMNS, className="text-center"),
                className="no-results",
            )
        ]
    return [table_row(r, placeholder) for r in records]


def pagination_window(page: int, page_count: int) -> range:
    """Page numbers shown around the current page (at most five)."""
    start = max(1, page - PAGE_WINDOW)
    end = min(page_count, page + PAGE_WINDOW)
    return range(start, end + 1)


def _page_item(label: str, target: int, role: str, *, disabled: bool = False, active: bool = False) -> html.Li:
    classes = ["page-item"]
    if disabled:
        classes.append("disabled")
    if active:
        classes.append("active")
    return html.Li(
        html.A(label, id=page_link_id(role, target), n_clicks=0, href="#", className="page-link"),
        className=" ".join(classes),
    )


def pagination_items(page: int, page_count: int) -> List[html.Li]:
    items = [_page_item("Previous", page - 1, "prev", disabled=page == 1)]
    for i in pagination_window(page, page_count):
        items.append(_page_item(str(i), i, "page", active=i == page))
    items.append(
        _page_item("Next", page + 1, "next", disabled=page == page_count or page_count == 0)
    )
    return items


def sort_icon_class(field: str, sort: Optional[SortDirective]) -> str:
    if sort is None or sort.field != field:
        return "fa-solid fa-sort sort-icon"
    if sort.direction == ASC:
        return "fa-solid fa-sort-up sort-icon active-sort"
    return "fa-solid fa-sort-down sort-icon active-sort"


def sort_icon_classes(sort: Optional[SortDirective]) -> List[str]:
    # Same order as SORTABLE_COLUMNS, which is the order the headers are laid out in
    return [sort_icon_class(field, sort) for field, _ in SORTABLE_COLUMNS]
