from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from catalog_admin.core.exceptions import InvalidTransition
from catalog_admin.core.record import Record

CLOSED = "closed"
VIEWING = "viewing"
EDITING = "editing"

_MODES = (CLOSED, VIEWING, EDITING)


@dataclass(frozen=True)
class EditForm:
    """
    Snapshot of a record's editable fields as the detail form shows them.

    ``price`` is kept as text: it is whatever the user typed and is only
    converted to a number on save.
    """

    id: int
    title: str
    price: str
    description: str
    image: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> EditForm:
        return cls(
            id=record.id,
            title=record.title,
            price=str(record.price),
            description=record.description,
            image=record.first_image,
        )


@dataclass
class EditSession:
    """
    Tracks which record, if any, is open in the detail modal.

    Closed -> Viewing(id) -> Editing(id) -> Closed, or Viewing(id) -> Closed.
    """

    target_id: Optional[int] = None
    mode: str = CLOSED
    form: Optional[EditForm] = None

    @property
    def is_open(self) -> bool:
        return self.mode != CLOSED

    @property
    def is_editing(self) -> bool:
        return self.mode == EDITING

    def open(self, record: Record) -> None:
        self.target_id = record.id
        self.form = EditForm.from_record(record)
        self.mode = VIEWING

    def begin_edit(self) -> None:
        if self.mode != VIEWING:
            raise InvalidTransition(f"Cannot start editing from '{self.mode}'")
        self.mode = EDITING

    def require_editing(self) -> int:
        if self.mode != EDITING or self.target_id is None:
            raise InvalidTransition(f"Cannot save from '{self.mode}'")
        return self.target_id

    def close(self) -> None:
        self.target_id = None
        self.form = None
        self.mode = CLOSED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_id": self.target_id,
            "mode": self.mode,
            "form": asdict(self.form) if self.form is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> EditSession:
        if not isinstance(data, dict):
            return cls()
        mode = data.get("mode", CLOSED)
        if mode not in _MODES or data.get("target_id") is None:
            return cls()
        form_data = data.get("form")
        return cls(
            target_id=int(data["target_id"]),
            mode=mode,
            form=EditForm(**form_data) if isinstance(form_data, dict) else None,
        )
