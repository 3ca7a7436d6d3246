"""Shared fixtures for revocation and registry tests."""
from __future__ import annotations

import pytest

from fieldguard.domain.record import Record


@pytest.fixture()
def record() -> Record:
    return Record({"_token": "hidden value", "title": "public value"})


@pytest.fixture()
def storage() -> Record:
    return Record()
