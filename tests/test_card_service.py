from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the giftcard_api package is importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from giftcard_api.repositories.json_storage import JsonStorage  # noqa: E402
from giftcard_api.services.card_service import CardService  # noqa: E402
from giftcard_api.services.errors import (  # noqa: E402
    InternalError,
    InvalidAmount,
    InvalidCurrency,
    InvalidFormat,
    InvalidStatus,
    NotFound,
)
from giftcard_api.services.price_service import PriceService  # noqa: E402
from giftcard_api.services.store import GiftCardStore  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    store = GiftCardStore(JsonStorage(tmp_path / "data"))
    store.load()
    return store


@pytest.fixture()
def cards(store):
    return CardService(store)


@pytest.fixture()
def prices(store):
    return PriceService(store)


@pytest.mark.parametrize("code", ["A", "ABC123", "0" * 25, "Z9Y8X7"])
def test_validate_registers_pending_once(cards, store, code):
    card, global_price = cards.validate(code)
    assert card["code"] == code
    assert card["status"] == "pending"
    assert card["createdAt"].endswith("Z")
    assert global_price is None
    assert list(store.cards) == [code]

    again, _ = cards.validate(code)
    assert again == card
    assert len(store.cards) == 1


@pytest.mark.parametrize("code", ["", "abc123", "ABC-123", "ABC 123", "A" * 26, "ABC123\n", None, 123, ["ABC"]])
def test_validate_rejects_malformed_codes(cards, store, code):
    with pytest.raises(InvalidFormat):
        cards.validate(code)
    assert store.cards == {}


def test_validate_returns_current_global_price(cards, prices):
    prices.set(9.99, "EUR")
    _, global_price = cards.validate("ABC123")
    assert global_price["amount"] == 9.99
    assert global_price["currency"] == "EUR"


def test_returned_records_are_copies(cards, store):
    card, _ = cards.validate("ABC123")
    card["status"] = "accepted"
    assert store.cards["ABC123"]["status"] == "pending"


def test_set_status_updates_card(cards):
    cards.validate("ABC123")
    card = cards.set_status("ABC123", "accepted")
    assert card["status"] == "accepted"
    assert "updatedAt" in card


def test_set_status_rejects_unknown_status(cards, store):
    cards.validate("ABC123")
    with pytest.raises(InvalidStatus):
        cards.set_status("ABC123", "approved")
    assert store.cards["ABC123"]["status"] == "pending"
    assert "updatedAt" not in store.cards["ABC123"]


def test_unknown_code_is_not_found_before_status_check(cards, store):
    with pytest.raises(NotFound):
        cards.set_status("NOPE", "bogus")
    with pytest.raises(NotFound):
        cards.set_price("NOPE", -1)
    assert store.cards == {}


def test_set_price_defaults_to_usd(cards):
    cards.validate("ABC123")
    card = cards.set_price("ABC123", 25)
    assert card["price"] == {"amount": 25, "currency": "USD"}


def test_set_price_copies_global_currency(cards, prices):
    cards.validate("ABC123")
    prices.set(10, "EUR")
    card = cards.set_price("ABC123", 12.5)
    assert card["price"] == {"amount": 12.5, "currency": "EUR"}

    # not live-linked: changing the global price later keeps the card currency
    prices.set(10, "GBP")
    assert cards.get_all()[0]["price"]["currency"] == "EUR"


@pytest.mark.parametrize("amount", [-1, "10", None, True, float("nan"), float("inf"), 10**400])
def test_set_price_rejects_invalid_amounts(cards, store, amount):
    cards.validate("ABC123")
    with pytest.raises(InvalidAmount):
        cards.set_price("ABC123", amount)
    assert "price" not in store.cards["ABC123"]


def test_get_all_keeps_insertion_order(cards):
    for code in ("ZZZ", "AAA", "MMM"):
        cards.validate(code)
    assert [c["code"] for c in cards.get_all()] == ["ZZZ", "AAA", "MMM"]


def test_stats_counts_by_status(cards):
    for code in ("A1", "A2", "A3", "A4"):
        cards.validate(code)
    cards.set_status("A1", "accepted")
    cards.set_status("A2", "declined")
    cards.set_status("A3", "accepted")
    stats = cards.stats()
    assert stats == {"total": 4, "accepted": 2, "declined": 1, "pending": 1}
    assert stats["total"] == stats["accepted"] + stats["declined"] + stats["pending"]


def test_price_ledger_validation(prices, store):
    assert prices.get() is None
    with pytest.raises(InvalidAmount):
        prices.set(-0.01, "USD")
    with pytest.raises(InvalidAmount):
        prices.set(10**400, "USD")
    with pytest.raises(InvalidCurrency):
        prices.set(5, "")
    with pytest.raises(InvalidCurrency):
        prices.set(5, 42)
    assert store.price is None

    price = prices.set(0, "USD")
    assert price["amount"] == 0
    assert price["currency"] == "USD"
    assert price["updatedAt"].endswith("Z")
    assert prices.get() == price


def test_flush_failure_surfaces_as_internal_error(cards, store, monkeypatch):
    def _boom(*_a, **_kw):
        raise OSError("disk full")

    monkeypatch.setattr(Path, "write_text", _boom)
    with pytest.raises(InternalError):
        cards.validate("ABC123")
