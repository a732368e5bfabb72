from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from catalog_admin.core.exceptions import NetworkFailure, RequestFailure
from catalog_admin.core.record import Record, records_from_api

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductDraft:
    """Body of a create request."""

    title: str
    price: int | float | None
    description: str
    category_id: Optional[int]
    images: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "categoryId": self.category_id,
            "images": list(self.images),
        }


@dataclass(frozen=True)
class ProductUpdate:
    """Body of an update request."""

    title: str
    price: int | float | None
    description: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
        }


class CatalogClient:
    """
    Thin wrapper around the remote products collection.

    No retries, no timeouts: a failure is raised once and left to the caller.
    """

    def __init__(self, api_base_url: str, session: Optional[requests.Session] = None) -> None:
        self.collection_url = f"{api_base_url.rstrip('/')}/products"
        self._session = session or requests.Session()

    def fetch_all(self) -> List[Record]:
        logger.info("catalog_request", extra={"method": "GET", "url": self.collection_url})
        try:
            resp = self._session.get(self.collection_url)
        except requests.exceptions.RequestException as e:
            logger.warning("Catalog fetch failed: %s", e, extra={"url": self.collection_url})
            raise NetworkFailure() from e

        if not resp.ok:
            logger.warning(
                "Catalog fetch returned an error status",
                extra={"url": self.collection_url, "status": resp.status_code},
            )
            raise NetworkFailure()

        try:
            payload = resp.json()
        except ValueError as e:
            logger.warning("Catalog response is not JSON", extra={"url": self.collection_url})
            raise NetworkFailure() from e

        if not isinstance(payload, list):
            logger.warning(
                "Catalog response is not an array",
                extra={"url": self.collection_url, "type": type(payload).__name__},
            )
            raise NetworkFailure()

        records = records_from_api(payload)
        logger.info("catalog_loaded", extra={"n_records": len(records)})
        return records

    def create(self, draft: ProductDraft) -> Dict[str, Any]:
        return self._write("POST", self.collection_url, draft.to_payload(), "Failed to create product!")

    def update(self, record_id: int, changes: ProductUpdate) -> Dict[str, Any]:
        url = f"{self.collection_url}/{record_id}"
        return self._write("PUT", url, changes.to_payload(), "Failed to update product!")

    def _write(self, method: str, url: str, payload: Dict[str, Any], failure_message: str) -> Dict[str, Any]:
        logger.info("catalog_request", extra={"method": method, "url": url})
        try:
            resp = self._session.request(method, url, json=payload)
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise RequestFailure("An error occurred while contacting the product API.") from e

        if not resp.ok:
            logger.warning(
                "Catalog write returned an error status",
                extra={"method": method, "url": url, "status": resp.status_code},
            )
            raise RequestFailure(failure_message)

        try:
            body = resp.json()
        except ValueError:
            # The write went through; the body is informational only
            return {}
        return body if isinstance(body, dict) else {}
