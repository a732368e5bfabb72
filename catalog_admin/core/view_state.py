from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from catalog_admin.core.exceptions import InvalidCommand
from catalog_admin.core.record import Record

ASC = "asc"
DESC = "desc"

SORTABLE_FIELDS = ("id", "title", "price", "category", "description")
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class SortDirective:
    field: str
    direction: str = ASC

    def flipped(self) -> SortDirective:
        return SortDirective(self.field, DESC if self.direction == ASC else ASC)

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "direction": self.direction}

    @classmethod
    def from_dict(cls, data: Any) -> Optional[SortDirective]:
        if not isinstance(data, dict) or not data.get("field"):
            return None
        direction = data.get("direction", ASC)
        if direction not in (ASC, DESC):
            direction = ASC
        return cls(field=str(data["field"]), direction=direction)


def _sort_key(record: Record, field_name: str):
    value = record.sort_value(field_name)
    # Missing values (no category) always sit after present ones when ascending
    if value is None:
        return (1, "")
    if isinstance(value, str):
        return (0, value.lower())
    return (0, value)


@dataclass
class ViewState:
    """
    Client-side cache of the catalog plus the derived list projection.

    - full_set: every record from the last successful fetch, in API order
    - filtered_set: records whose title matches ``keyword``, in sort order
    - page / page_size: pagination cursor (page is 1-based, never clamped)
    - sort: active sort directive, or None for API order
    """

    full_set: List[Record] = field(default_factory=list)
    filtered_set: List[Record] = field(default_factory=list)
    keyword: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort: Optional[SortDirective] = None

    @classmethod
    def from_records(cls, records: Sequence[Record], page_size: int = DEFAULT_PAGE_SIZE) -> ViewState:
        state = cls(page_size=page_size)
        state.replace_records(records)
        return state

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def replace_records(self, records: Sequence[Record]) -> None:
        """Swap in a freshly fetched catalog, keeping keyword, sort and page."""
        self.full_set = list(records)
        self._refilter()

    def apply_search(self, keyword: str) -> None:
        self.keyword = keyword or ""
        self.page = 1
        self._refilter()

    def apply_sort(self, field_name: str, toggle: bool = True) -> None:
        if field_name not in SORTABLE_FIELDS:
            raise InvalidCommand(f"Cannot sort by unknown field {field_name!r}")

        if toggle and self.sort is not None and self.sort.field == field_name:
            self.sort = self.sort.flipped()
        elif self.sort is None or self.sort.field != field_name:
            self.sort = SortDirective(field_name, ASC)
        # toggle=False on the active field re-sorts with the current direction
        self._resort()

    def set_page_size(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidCommand(f"Page size must be a positive integer, got {size!r}")
        self.page_size = size
        self.page = 1

    def go_to_page(self, page: int) -> None:
        # No bounds check: an out-of-range page just renders an empty slice
        if isinstance(page, bool):
            raise InvalidCommand(f"Page must be an integer, got {page!r}")
        try:
            self.page = int(page)
        except (TypeError, ValueError):
            raise InvalidCommand(f"Page must be an integer, got {page!r}") from None

    def _refilter(self) -> None:
        needle = self.keyword.lower()
        self.filtered_set = [r for r in self.full_set if needle in r.title.lower()]
        if self.sort is not None:
            self._resort()

    def _resort(self) -> None:
        if self.sort is None:
            return
        # list.sort is stable for reverse=True too, so ties keep their prior order
        self.filtered_set.sort(
            key=lambda r: _sort_key(r, self.sort.field),
            reverse=self.sort.direction == DESC,
        )

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------
    def page_slice(self) -> List[Record]:
        if self.page < 1:
            return []
        start = (self.page - 1) * self.page_size
        return self.filtered_set[start:start + self.page_size]

    def page_count(self) -> int:
        if not self.filtered_set:
            return 0
        return math.ceil(len(self.filtered_set) / self.page_size)

    @property
    def has_results(self) -> bool:
        return bool(self.filtered_set)

    def find(self, record_id: int) -> Optional[Record]:
        return next((r for r in self.full_set if r.id == record_id), None)

    # ------------------------------------------------------------------
    # Store (de)serialisation
    # ------------------------------------------------------------------
    def _positions(self) -> List[int]:
        # Positions, not ids: the API does not guarantee unique ids
        index_of = {id(r): i for i, r in enumerate(self.full_set)}
        positions = []
        for r in self.filtered_set:
            pos = index_of.get(id(r))
            positions.append(pos if pos is not None else self.full_set.index(r))
        return positions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": [r.to_dict() for r in self.full_set],
            "order": self._positions(),
            "keyword": self.keyword,
            "page": self.page,
            "page_size": self.page_size,
            "sort": self.sort.to_dict() if self.sort is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        records = [Record.from_dict(r) for r in data.get("records", [])]

        state = cls(
            full_set=records,
            keyword=str(data.get("keyword") or ""),
            page=int(data.get("page", 1)),
            page_size=int(data.get("page_size", DEFAULT_PAGE_SIZE)),
            sort=SortDirective.from_dict(data.get("sort")),
        )

        order = data.get("order")
        if order is None:
            state._refilter()
        else:
            # Keep the exact stored arrangement so earlier stable sorts survive
            state.filtered_set = [
                records[i] for i in order
                if isinstance(i, int) and 0 <= i < len(records)
            ]
        return state
