"""Tests for the command-line entry point."""

from datetime import date

import pytest

import main
from models.paging import PageRequest


@pytest.fixture(autouse=True)
def no_database(monkeypatch):
    monkeypatch.setattr(main, "init_pool", lambda: None)
    monkeypatch.setattr(main, "close_pool", lambda: None)


def test_init_db(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "create_tables", lambda: calls.append("created"))
    lines = main.run(main.build_parser().parse_args(["init-db"]))
    assert calls == ["created"]
    assert lines == ["Database schema created successfully."]


def test_last_customer_without_orders(fake_db):
    lines = main.run(main.build_parser().parse_args(["last-customer"]))
    assert lines == ["No orders yet."]


def test_last_customer(fake_db):
    fake_db.returning((2, "Bob", None))
    lines = main.run(main.build_parser().parse_args(["last-customer"]))
    assert lines == ["#2 Bob"]


def test_orders_sorted(fake_db):
    fake_db.returning((1, 1, date(2023, 1, 17)))
    lines = main.run(main.build_parser().parse_args(["orders", "1", "2"]))
    assert lines == ["Order #1 | customer 1 | 2023-01-17"]
    assert fake_db.last_sql.endswith("ORDER BY order_id ASC;")


def test_orders_paged(fake_db):
    lines = main.run(main.build_parser().parse_args(["orders", "1", "--page", "1", "--size", "3"]))
    assert lines == ["No orders found."]
    assert fake_db.last_params == ([1], 3, PageRequest(1, 3).offset)


def test_main_prints_and_closes_pool(monkeypatch, capsys, fake_db):
    closed = []
    monkeypatch.setattr(main, "close_pool", lambda: closed.append(True))
    main.main(["last-customer"])
    assert "No orders yet." in capsys.readouterr().out.splitlines()
    assert closed == [True]
