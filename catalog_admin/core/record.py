from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

# Characters the API sometimes leaves around image URLs when it stores a
# stringified array instead of a real one.
_STRAY_CHARS = "[]\"' \t\r\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalise_images(raw: Any) -> List[str]:
    """
    Turn the API's ``images`` field into a clean list of http(s) URLs.

    The field is untrusted: it is usually a list of strings, but entries can
    carry stray brackets/quotes (``'["https://a.png"'``) and some records ship
    the whole array as one JSON string. Anything that is not an absolute
    http(s) URL after cleaning is dropped.
    """
    if raw is None:
        return []

    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = raw
        items: Iterable[Any] = parsed if isinstance(parsed, list) else [parsed]
    elif isinstance(raw, (list, tuple)):
        items = raw
    else:
        return []

    urls: List[str] = []
    for item in items:
        if not isinstance(item, str):
            continue
        # commas are legal inside URLs, so each entry is cleaned whole
        cleaned = item.strip(_STRAY_CHARS)
        if _is_http_url(cleaned):
            urls.append(cleaned)
    return urls


def _is_http_url(value: str) -> bool:
    if not value:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def coerce_number(raw: Any) -> int | float | None:
    """
    Convert a loosely typed API value (e.g. a price sent as ``"12.5"``) to a
    number.

    Integers stay integers, decimals become floats. Anything unparseable
    yields ``None``.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    if raw is None:
        return None

    text = str(raw).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    # nan/inf cannot be encoded as JSON numbers
    if not math.isfinite(value):
        return None
    return value


def parse_int(raw: Any) -> Optional[int]:
    """
    Read the leading integer from form input, e.g. ``"12.5"`` -> ``12``.

    Leading whitespace and a sign are allowed and anything after the digits
    is ignored. Input with no leading digits yields ``None`` (JSON ``null``).
    Only decimal digits are read.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None

    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class Category:
    name: str
    id: Optional[int] = None

    @classmethod
    def from_api(cls, data: Any) -> Optional[Category]:
        if not isinstance(data, dict) or data.get("name") is None:
            return None
        cat_id = data.get("id")
        return cls(
            name=str(data["name"]),
            id=cat_id if isinstance(cat_id, int) and not isinstance(cat_id, bool) else None,
        )


@dataclass(frozen=True)
class Record:
    """
    A product as returned by the remote catalog API.

    Records are never edited in place; edits go to the API and the whole
    catalog is fetched again.
    """

    id: int
    title: str
    price: int | float
    description: str = ""
    category: Optional[Category] = None
    images: List[str] = field(default_factory=list)

    @property
    def category_name(self) -> Optional[str]:
        return self.category.name if self.category is not None else None

    @property
    def first_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def sort_value(self, field_name: str) -> Any:
        if field_name == "category":
            return self.category_name
        return getattr(self, field_name)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> Record:
        """
        Build a Record from raw API JSON.

        Raises ValueError when the payload has no usable integer id.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")

        record_id = data.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise ValueError(f"Record has no integer id: {record_id!r}")

        price = data.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            price = coerce_number(price)
            if price is None:
                price = 0

        return cls(
            id=record_id,
            title=str(data.get("title") or ""),
            price=price,
            description=str(data.get("description") or ""),
            category=Category.from_api(data.get("category")),
            images=normalise_images(data.get("images")),
        )

    def to_dict(self) -> Dict[str, Any]:
        category = None
        if self.category is not None:
            category = {"name": self.category.name, "id": self.category.id}
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": category,
            "images": list(self.images),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Record:
        # Stored dicts come from to_dict, so the API parsing path is safe to reuse
        return cls.from_api(data)


def records_from_api(payload: Iterable[Any]) -> List[Record]:
    """Parse an API array, skipping entries that cannot be turned into a Record."""
    records: List[Record] = []
    for raw in payload:
        try:
            records.append(Record.from_api(raw))
        except ValueError as e:
            logger.warning("Skipping malformed product record: %s", e)
    return records
