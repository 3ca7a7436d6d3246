"""Shared fixtures for view tests."""
from __future__ import annotations

import pytest

from fieldguard.domain.record import Record
from fieldguard.domain.types import Symbol
from fieldguard.view.access_view import AccessControlledView


@pytest.fixture()
def plain_record() -> dict:
    return {"_secret": "x", "name": "ok"}


@pytest.fixture()
def symbol_id() -> Symbol:
    return Symbol("id")


@pytest.fixture()
def record(symbol_id) -> Record:
    return Record({
        "_token": "hidden value",
        "title": "public value",
        symbol_id: "id-0001",
    })


@pytest.fixture()
def view(record) -> AccessControlledView:
    return AccessControlledView(record)
