from __future__ import annotations

import pytest
import requests

from catalog_admin.core.exceptions import NetworkFailure, RequestFailure
from catalog_admin.services.catalog_client import CatalogClient, ProductDraft, ProductUpdate

BASE = "https://api.example.com/api/v1"


def _make_client(fake_api) -> CatalogClient:
    return CatalogClient(BASE, session=fake_api)


def test_fetch_all_returns_records(fake_api):
    client = _make_client(fake_api)

    records = client.fetch_all()

    assert [r.id for r in records] == [1, 2, 3]
    assert fake_api.calls == [("GET", f"{BASE}/products", None)]


def test_collection_url_ignores_trailing_slash(fake_api):
    client = CatalogClient(BASE + "/", session=fake_api)
    assert client.collection_url == f"{BASE}/products"


def test_fetch_all_error_status_is_network_failure(fake_api):
    fake_api.fail_get = 500
    with pytest.raises(NetworkFailure):
        _make_client(fake_api).fetch_all()


def test_fetch_all_transport_error_is_network_failure(fake_api):
    fake_api.raise_on_get = requests.exceptions.ConnectionError("refused")
    with pytest.raises(NetworkFailure):
        _make_client(fake_api).fetch_all()


def test_fetch_all_non_json_body_is_network_failure():
    class HtmlResponse:
        ok = True
        status_code = 200

        def json(self):
            raise ValueError("Expecting value")

    class HtmlSession:
        def get(self, url, **kwargs):
            return HtmlResponse()

    with pytest.raises(NetworkFailure):
        CatalogClient(BASE, session=HtmlSession()).fetch_all()


def test_fetch_all_non_array_body_is_network_failure(fake_api):
    fake_api.products = {"items": []}
    with pytest.raises(NetworkFailure):
        _make_client(fake_api).fetch_all()


def test_create_posts_payload(fake_api):
    client = _make_client(fake_api)
    draft = ProductDraft(
        title="New Hat",
        price=15,
        description="Wool",
        category_id=2,
        images=["https://img.example.com/hat.png"],
    )

    created = client.create(draft)

    method, url, body = fake_api.calls[-1]
    assert method == "POST"
    assert url == f"{BASE}/products"
    assert body == {
        "title": "New Hat",
        "price": 15,
        "description": "Wool",
        "categoryId": 2,
        "images": ["https://img.example.com/hat.png"],
    }
    assert created["id"] == 4


def test_update_puts_only_editable_fields(fake_api):
    client = _make_client(fake_api)

    client.update(2, ProductUpdate(title="Black Jeans", price=None, description="Denim"))

    method, url, body = fake_api.calls[-1]
    assert method == "PUT"
    assert url == f"{BASE}/products/2"
    assert body == {"title": "Black Jeans", "price": None, "description": "Denim"}


@pytest.mark.parametrize("status", [400, 401, 404, 500])
def test_write_error_status_is_request_failure(fake_api, status):
    fake_api.fail_write = status
    client = _make_client(fake_api)

    with pytest.raises(RequestFailure):
        client.update(1, ProductUpdate(title="x", price=1, description="y"))
    with pytest.raises(RequestFailure):
        client.create(ProductDraft(title="x", price=1, description="y", category_id=1))


def test_created_record_shows_up_after_reload(fake_api):
    client = _make_client(fake_api)
    client.create(ProductDraft(title="Round Trip", price=99, description="Back again", category_id=1))

    records = client.fetch_all()

    created = next(r for r in records if r.title == "Round Trip")
    assert created.price == 99
    assert created.description == "Back again"
