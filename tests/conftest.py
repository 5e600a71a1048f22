"""Shared fixtures: a fake pooled connection wired into both repositories."""

import pytest

from tests.fakes import FakeConnection

_REPO_MODULES = ("repositories.order_repo", "repositories.customer_repo")


@pytest.fixture
def fake_db(monkeypatch) -> FakeConnection:
    conn = FakeConnection()
    for module in _REPO_MODULES:
        monkeypatch.setattr(f"{module}.get_connection", conn.checkout)
        monkeypatch.setattr(f"{module}.release_connection", conn.checkin)
    return conn
