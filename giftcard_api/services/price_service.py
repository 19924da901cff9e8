"""Global price ledger."""
from __future__ import annotations

import logging

from giftcard_api.domain.cards import is_valid_amount, is_valid_currency, utc_timestamp
from giftcard_api.services.errors import InvalidAmount, InvalidCurrency
from giftcard_api.services.store import GiftCardStore

logger = logging.getLogger(__name__)


class PriceService:
    def __init__(self, store: GiftCardStore) -> None:
        self.store = store

    def get(self) -> dict | None:
        with self.store.lock:
            return self.store.snapshot(self.store.price)

    def set(self, amount, currency) -> dict:
        """Replace the global price wholesale."""
        if not is_valid_amount(amount):
            raise InvalidAmount()
        if not is_valid_currency(currency):
            raise InvalidCurrency()
        store = self.store
        with store.lock:
            store.price = {"amount": amount, "currency": currency, "updatedAt": utc_timestamp()}
            logger.info("Global price set to %s %s", amount, currency)
            store.persist()
            return store.snapshot(store.price)
