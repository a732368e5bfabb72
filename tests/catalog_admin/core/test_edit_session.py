from __future__ import annotations

import pytest

from catalog_admin.core.edit_session import CLOSED, EDITING, VIEWING, EditForm, EditSession
from catalog_admin.core.exceptions import InvalidTransition
from catalog_admin.core.record import Record


def _make_record() -> Record:
    return Record(
        id=7,
        title="Desk Lamp",
        price=45,
        description="Warm light",
        images=["https://img.example.com/lamp.png"],
    )


def test_open_snapshots_record_in_view_mode():
    session = EditSession()
    session.open(_make_record())

    assert session.mode == VIEWING
    assert session.target_id == 7
    assert session.is_open is True
    assert session.is_editing is False
    assert session.form == EditForm(
        id=7,
        title="Desk Lamp",
        price="45",
        description="Warm light",
        image="https://img.example.com/lamp.png",
    )


def test_view_edit_close_lifecycle():
    session = EditSession()
    session.open(_make_record())
    session.begin_edit()

    assert session.mode == EDITING
    assert session.require_editing() == 7

    session.close()
    assert session.mode == CLOSED
    assert session.target_id is None
    assert session.form is None


def test_begin_edit_requires_viewing():
    with pytest.raises(InvalidTransition):
        EditSession().begin_edit()

    session = EditSession()
    session.open(_make_record())
    session.begin_edit()
    with pytest.raises(InvalidTransition):
        session.begin_edit()


def test_save_requires_editing():
    session = EditSession()
    session.open(_make_record())
    with pytest.raises(InvalidTransition):
        session.require_editing()


def test_dict_roundtrip():
    session = EditSession()
    session.open(_make_record())
    session.begin_edit()

    assert EditSession.from_dict(session.to_dict()) == session


@pytest.mark.parametrize("raw", [None, {}, {"mode": "editing"}, {"mode": "bogus", "target_id": 1}, "nope"])
def test_from_dict_falls_back_to_closed(raw):
    assert EditSession.from_dict(raw) == EditSession()
