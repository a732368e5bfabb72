from __future__ import annotations

__all__ = [
    "IDs",
    "sort_header_id",
    "sort_icon_id",
    "product_row_id",
    "page_link_id",
]


class IDs:
    class Store:
        VIEW_STATE = "view-state"
        EDIT_SESSION = "edit-session"

    class Control:
        # Toolbar
        SEARCH_INPUT = "search-input"
        PAGE_SIZE_SELECT = "page-size-select"
        REFRESH_BTN = "refresh-btn"
        NEW_PRODUCT_BTN = "new-product-btn"
        EXPORT_BTN = "export-btn"
        DOWNLOAD_CSV = "download-csv"

        # Table + pagination
        TABLE_BODY = "product-table-body"
        PAGINATION = "pagination"

        # Notices
        NOTICE = "notice"

        # Detail / edit modal
        DETAIL_MODAL = "detail-modal"
        DETAIL_IMG = "detail-img"
        EDIT_ID = "edit-id"
        EDIT_TITLE = "edit-title"
        EDIT_PRICE = "edit-price"
        EDIT_DESC = "edit-desc"
        EDIT_ENABLE_BTN = "edit-enable-btn"
        EDIT_SAVE_BTN = "edit-save-btn"
        DETAIL_CLOSE_BTN = "detail-close-btn"

        # Create modal
        CREATE_MODAL = "create-modal"
        CREATE_TITLE = "create-title"
        CREATE_PRICE = "create-price"
        CREATE_DESC = "create-desc"
        CREATE_CAT_ID = "create-cat-id"
        CREATE_IMG = "create-img"
        CREATE_SUBMIT_BTN = "create-submit-btn"
        CREATE_CANCEL_BTN = "create-cancel-btn"

    class Pattern:
        # pattern-matching "type" strings
        SORT_HEADER = "sort-header"
        SORT_ICON = "sort-icon"
        PRODUCT_ROW = "product-row"
        PAGE_LINK = "page-link"


def sort_header_id(field: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": field}


def sort_icon_id(field: str) -> dict:
    return {"type": IDs.Pattern.SORT_ICON, "index": field}


def product_row_id(record_id: int) -> dict:
    return {"type": IDs.Pattern.PRODUCT_ROW, "index": record_id}


def page_link_id(role: str, page: int) -> dict:
    # role keeps ids unique when "Previous"/"Next" point at a numbered page
    return {"type": IDs.Pattern.PAGE_LINK, "role": role, "index": page}
