from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from catalog_admin.core.edit_session import EditSession
from catalog_admin.core.exceptions import CatalogAdminError, NetworkFailure, NotFound
from catalog_admin.core.record import parse_int
from catalog_admin.core.view_state import ViewState
from catalog_admin.services.catalog_client import CatalogClient, ProductDraft, ProductUpdate
from catalog_admin.services.export_service import ExportFile, export_csv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """A single user-facing message; ``level`` is a Bootstrap colour."""

    message: str
    level: str = "info"


@dataclass
class CommandResult:
    ok: bool = True
    notice: Optional[Notice] = None
    export: Optional[ExportFile] = None
    extra: Dict[str, Any] = field(default_factory=dict)


class CatalogDashboard:
    """
    Named operations over a ViewState and an EditSession.

    The UI calls ``dispatch("search", keyword="shirt")`` and friends instead of
    poking at the state directly. Every CatalogAdminError raised by a command
    is caught here, once, and turned into a Notice.
    """

    def __init__(
            self,
            client: CatalogClient,
            view: Optional[ViewState] = None,
            session: Optional[EditSession] = None,
    ) -> None:
        self.client = client
        self.view = view if view is not None else ViewState()
        self.session = session if session is not None else EditSession()

        self._commands: Dict[str, Callable[..., CommandResult]] = {
            "reload": self.reload,
            "search": self.search,
            "sort": self.sort,
            "set_page_size": self.set_page_size,
            "go_to_page": self.go_to_page,
            "export": self.export,
            "open_detail": self.open_detail,
            "begin_edit": self.begin_edit,
            "save_edit": self.save_edit,
            "close_detail": self.close_detail,
            "create": self.create,
        }

    @property
    def command_names(self) -> list[str]:
        return sorted(self._commands)

    def dispatch(self, name: str, **kwargs: Any) -> CommandResult:
        try:
            handler = self._commands[name]
        except KeyError:
            raise KeyError(f"Unknown command {name!r}") from None

        try:
            return handler(**kwargs)
        except CatalogAdminError as e:
            logger.warning(
                "Command failed: %s",
                e,
                extra={"command": name, "error": type(e).__name__},
            )
            return CommandResult(ok=False, notice=Notice(e.user_message, "danger"))

    # ------------------------------------------------------------------
    # List commands
    # ------------------------------------------------------------------
    def reload(self) -> CommandResult:
        records = self.client.fetch_all()
        self.view.replace_records(records)
        return CommandResult()

    def search(self, keyword: str) -> CommandResult:
        self.view.apply_search(keyword)
        return CommandResult()

    def sort(self, field: str) -> CommandResult:
        self.view.apply_sort(field, toggle=True)
        return CommandResult()

    def set_page_size(self, size: int) -> CommandResult:
        self.view.set_page_size(size)
        return CommandResult()

    def go_to_page(self, page: int) -> CommandResult:
        self.view.go_to_page(page)
        return CommandResult()

    def export(self) -> CommandResult:
        return CommandResult(export=export_csv(self.view.filtered_set))

    # ------------------------------------------------------------------
    # Detail / edit
    # ------------------------------------------------------------------
    def open_detail(self, record_id: int) -> CommandResult:
        record = self.view.find(record_id)
        if record is None:
            # Unknown ids are ignored: the modal simply does not open
            logger.debug("Detail requested for unknown product id %s", record_id)
            return CommandResult(ok=False)
        self.session.open(record)
        return CommandResult()

    def begin_edit(self) -> CommandResult:
        self.session.begin_edit()
        return CommandResult()

    def close_detail(self) -> CommandResult:
        self.session.close()
        return CommandResult()

    def save_edit(self, title: str, price: Any, description: str) -> CommandResult:
        record_id = self.session.require_editing()
        if self.view.find(record_id) is None:
            raise NotFound()

        changes = ProductUpdate(
            title=title or "",
            price=parse_int(price),
            description=description or "",
        )
        self.client.update(record_id, changes)
        logger.info("product_updated", extra={"product_id": record_id})

        self.session.close()
        return self._reload_after_write("Product updated successfully!")

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------
    def create(
            self,
            title: str,
            price: Any,
            description: str,
            category_id: Any,
            image: Optional[str] = None,
    ) -> CommandResult:
        draft = ProductDraft(
            title=title or "",
            price=parse_int(price),
            description=description or "",
            category_id=parse_int(category_id),
            images=[image or ""],
        )
        created = self.client.create(draft)
        logger.info("product_created", extra={"product_id": created.get("id")})

        result = self._reload_after_write("Product created successfully!")
        result.extra["created"] = created
        return result

    def _reload_after_write(self, success_message: str) -> CommandResult:
        # The write already went through, so a failed reload is only a warning
        try:
            self.reload()
        except NetworkFailure as e:
            logger.warning("Reload after write failed: %s", e)
            return CommandResult(notice=Notice(f"{success_message} {e.user_message}", "warning"))
        return CommandResult(notice=Notice(success_message, "success"))
