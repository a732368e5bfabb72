from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, *, is_json: bool = True):
        self.status_code = status_code
        self._body = body
        self._is_json = is_json

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if not self._is_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return copy.deepcopy(self._body)


class FakeCatalogApi:
    """
    In-memory stand-in for the products API, shaped like a requests.Session.

    Set ``fail_get`` / ``fail_write`` to a status code to make those calls fail.
    """

    def __init__(self, products: Optional[List[Dict[str, Any]]] = None):
        self.products: List[Dict[str, Any]] = [dict(p) for p in (products or [])]
        self.calls: List[tuple] = []
        self.fail_get: Optional[int] = None
        self.fail_write: Optional[int] = None
        self.raise_on_get: Optional[Exception] = None

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.calls.append(("GET", url, None))
        if self.raise_on_get is not None:
            raise self.raise_on_get
        if self.fail_get is not None:
            return FakeResponse(self.fail_get, {"message": "boom"})
        return FakeResponse(200, self.products)

    def request(self, method: str, url: str, json: Any = None, **kwargs) -> FakeResponse:
        self.calls.append((method, url, json))
        if self.fail_write is not None:
            return FakeResponse(self.fail_write, {"message": "bad request"})

        if method == "POST":
            new_id = max((p["id"] for p in self.products), default=0) + 1
            product = {
                "id": new_id,
                "title": json["title"],
                "price": json["price"],
                "description": json["description"],
                "category": {"id": json["categoryId"], "name": "Misc"},
                "images": json["images"],
            }
            self.products.append(product)
            return FakeResponse(201, product)

        if method == "PUT":
            record_id = int(url.rsplit("/", 1)[-1])
            for product in self.products:
                if product["id"] == record_id:
                    product.update(json)
                    return FakeResponse(200, product)
            return FakeResponse(404, {"message": "not found"})

        return FakeResponse(405, {})


def make_product(
        record_id: int,
        title: str = "Product",
        price: float = 10,
        description: str = "",
        category: Optional[str] = "Clothes",
        images: Any = None,
) -> Dict[str, Any]:
    return {
        "id": record_id,
        "title": title,
        "price": price,
        "description": description,
        "category": {"id": 1, "name": category} if category is not None else None,
        "images": images if images is not None else [f"https://img.example.com/{record_id}.png"],
    }


@pytest.fixture
def fake_api() -> FakeCatalogApi:
    return FakeCatalogApi(
        [
            make_product(1, "Classic Red Shirt", 30, "Soft cotton"),
            make_product(2, "Blue Jeans", 10, "Denim"),
            make_product(3, "red Sneakers", 20, "Running shoes", category="Shoes"),
        ]
    )


@pytest.fixture
def product_factory():
    return make_product
