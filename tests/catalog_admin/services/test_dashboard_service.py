from __future__ import annotations

import pytest

from catalog_admin.core.edit_session import CLOSED, EDITING, VIEWING
from catalog_admin.services.catalog_client import CatalogClient
from catalog_admin.services.dashboard_service import CatalogDashboard


def _make_dashboard(fake_api, *, load: bool = True) -> CatalogDashboard:
    dashboard = CatalogDashboard(CatalogClient("https://api.example.com/api/v1", session=fake_api))
    if load:
        assert dashboard.dispatch("reload").ok
    return dashboard


def test_reload_populates_view(fake_api):
    dashboard = _make_dashboard(fake_api)
    assert [r.id for r in dashboard.view.filtered_set] == [1, 2, 3]


def test_reload_failure_becomes_single_notice(fake_api):
    dashboard = _make_dashboard(fake_api)
    fake_api.fail_get = 503

    result = dashboard.dispatch("reload")

    assert result.ok is False
    assert result.notice.level == "danger"
    assert result.notice.message == "Could not load product data!"
    # previous catalog is left alone
    assert len(dashboard.view.full_set) == 3


def test_list_commands(fake_api):
    dashboard = _make_dashboard(fake_api)

    dashboard.dispatch("search", keyword="red")
    assert [r.id for r in dashboard.view.filtered_set] == [1, 3]

    dashboard.dispatch("sort", field="price")
    assert [r.id for r in dashboard.view.filtered_set] == [3, 1]

    dashboard.dispatch("set_page_size", size=1)
    dashboard.dispatch("go_to_page", page=2)
    assert [r.id for r in dashboard.view.page_slice()] == [1]


def test_unknown_command_raises(fake_api):
    dashboard = _make_dashboard(fake_api, load=False)
    with pytest.raises(KeyError):
        dashboard.dispatch("delete_everything")


def test_export_uses_filtered_set_not_page(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("search", keyword="red")
    dashboard.dispatch("set_page_size", size=1)

    result = dashboard.dispatch("export")

    assert result.ok
    lines = result.export.content.splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("1,Classic Red Shirt,30,")


def test_export_with_no_rows_is_a_notice(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("search", keyword="abc")

    result = dashboard.dispatch("export")

    assert result.ok is False
    assert result.export is None
    assert result.notice.message == "There is no data to export!"


def test_open_detail_unknown_id_is_ignored(fake_api):
    dashboard = _make_dashboard(fake_api)

    result = dashboard.dispatch("open_detail", record_id=404)

    assert result.ok is False
    assert result.notice is None
    assert dashboard.session.mode == CLOSED


def test_edit_and_save_reloads_catalog(fake_api):
    dashboard = _make_dashboard(fake_api)

    dashboard.dispatch("open_detail", record_id=2)
    assert dashboard.session.mode == VIEWING
    assert dashboard.session.form.title == "Blue Jeans"

    dashboard.dispatch("begin_edit")
    result = dashboard.dispatch("save_edit", title="Black Jeans", price="12", description="Dark denim")

    assert result.ok
    assert result.notice.level == "success"
    assert dashboard.session.mode == CLOSED
    assert fake_api.calls[-2] == (
        "PUT",
        "https://api.example.com/api/v1/products/2",
        {"title": "Black Jeans", "price": 12, "description": "Dark denim"},
    )
    # the write is followed by a fresh GET
    assert fake_api.calls[-1][0] == "GET"
    updated = dashboard.view.find(2)
    assert updated.title == "Black Jeans"
    assert updated.price == 12


def test_save_passes_unparseable_price_through_as_null(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("open_detail", record_id=1)
    dashboard.dispatch("begin_edit")

    dashboard.dispatch("save_edit", title="Shirt", price="twelve", description="")

    assert fake_api.calls[-2][2]["price"] is None


def test_failed_save_stays_in_editing(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("open_detail", record_id=1)
    dashboard.dispatch("begin_edit")
    fake_api.fail_write = 400

    result = dashboard.dispatch("save_edit", title="Shirt", price="1", description="")

    assert result.ok is False
    assert result.notice.level == "danger"
    assert dashboard.session.mode == EDITING
    assert dashboard.view.find(1).title == "Classic Red Shirt"


def test_save_without_edit_mode_is_a_notice(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("open_detail", record_id=1)

    result = dashboard.dispatch("save_edit", title="x", price="1", description="y")

    assert result.ok is False
    assert result.notice is not None
    assert dashboard.session.mode == VIEWING


def test_close_detail_resets_session(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("open_detail", record_id=1)

    dashboard.dispatch("close_detail")

    assert dashboard.session.mode == CLOSED
    assert dashboard.session.target_id is None


def test_create_then_reload_shows_new_record(fake_api):
    dashboard = _make_dashboard(fake_api)

    result = dashboard.dispatch(
        "create",
        title="Canvas Tote",
        price="25",
        description="Carries things",
        category_id="3",
        image="https://img.example.com/tote.png",
    )

    assert result.ok
    assert result.extra["created"]["id"] == 4
    assert fake_api.calls[-2][2] == {
        "title": "Canvas Tote",
        "price": 25,
        "description": "Carries things",
        "categoryId": 3,
        "images": ["https://img.example.com/tote.png"],
    }
    created = dashboard.view.find(4)
    assert created.title == "Canvas Tote"
    assert created.price == 25
    assert created.description == "Carries things"


def test_create_failure_leaves_view_unchanged(fake_api):
    dashboard = _make_dashboard(fake_api)
    fake_api.fail_write = 400

    result = dashboard.dispatch("create", title="x", price="1", description="", category_id="1")

    assert result.ok is False
    assert result.notice.level == "danger"
    assert len(dashboard.view.full_set) == 3


def test_write_success_with_failed_reload_is_a_warning(fake_api):
    dashboard = _make_dashboard(fake_api)
    dashboard.dispatch("open_detail", record_id=1)
    dashboard.dispatch("begin_edit")
    fake_api.fail_get = 500

    result = dashboard.dispatch("save_edit", title="Shirt", price="1", description="")

    assert result.ok is True
    assert result.notice.level == "warning"
    assert dashboard.session.mode == CLOSED


def test_form_numbers_are_read_as_leading_integers(fake_api):
    dashboard = _make_dashboard(fake_api)

    dashboard.dispatch("create", title="Cap", price="12.5", description="", category_id="2.7")

    body = fake_api.calls[-2][2]
    assert body["price"] == 12
    assert body["categoryId"] == 2
    assert isinstance(body["categoryId"], int)


@pytest.mark.parametrize(
    "name, kwargs",
    [
        ("sort", {"field": "images"}),
        ("set_page_size", {"size": 0}),
        ("go_to_page", {"page": "last"}),
    ],
)
def test_invalid_list_arguments_become_a_notice(fake_api, name, kwargs):
    dashboard = _make_dashboard(fake_api)

    result = dashboard.dispatch(name, **kwargs)

    assert result.ok is False
    assert result.notice.level == "danger"
    assert [r.id for r in dashboard.view.filtered_set] == [1, 2, 3]
    assert dashboard.view.page == 1
