from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from catalog_admin.core.exceptions import EmptyExport
from catalog_admin.core.record import Record

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "products_export.csv"
EXPORT_MIME_TYPE = "text/csv"
EXPORT_HEADER = "ID,Title,Price,Category,Description"


@dataclass(frozen=True)
class ExportFile:
    content: str
    filename: str = EXPORT_FILENAME
    mime_type: str = EXPORT_MIME_TYPE


def _flatten(text: str) -> str:
    """Keep a value inside its column: commas and line breaks become spaces."""
    return text.replace(",", " ").replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def _format_price(price) -> str:
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def export_row(record: Record) -> str:
    return ",".join(
        [
            str(record.id),
            _flatten(record.title),
            _format_price(record.price),
            record.category_name or "N/A",
            _flatten(record.description),
        ]
    )


def export_csv(records: Sequence[Record]) -> ExportFile:
    """
    Serialise the visible (search-narrowed) records to a CSV text table.

    This is not a full CSV writer: quotes go through untouched, only commas
    and newlines are replaced. Raises EmptyExport when there is nothing to write.
    """
    if not records:
        raise EmptyExport()

    lines = [EXPORT_HEADER]
    lines.extend(export_row(r) for r in records)
    logger.info("export_built", extra={"n_rows": len(records)})
    return ExportFile(content="\n".join(lines) + "\n")
