"""
Card registry use cases: register/lookup codes, change status and price.
"""

from __future__ import annotations

import logging
from typing import Tuple

from giftcard_api.domain.cards import (
    DEFAULT_CURRENCY,
    STATUS_ACCEPTED,
    STATUS_DECLINED,
    STATUS_PENDING,
    is_valid_amount,
    is_valid_code,
    is_valid_status,
    utc_timestamp,
)
from giftcard_api.services.errors import InvalidAmount, InvalidFormat, InvalidStatus, NotFound
from giftcard_api.services.store import GiftCardStore

logger = logging.getLogger(__name__)


class CardService:
    """Operates on the card map held by a GiftCardStore."""

    def __init__(self, store: GiftCardStore) -> None:
        self.store = store

    def validate(self, code) -> Tuple[dict, dict | None]:
        """
        Return (card, global price) for code, registering it as pending the
        first time it is seen.
        """
        if not is_valid_code(code):
            raise InvalidFormat()
        store = self.store
        with store.lock:
            card = store.cards.get(code)
            if card is None:
                card = {"code": code, "status": STATUS_PENDING, "createdAt": utc_timestamp()}
                store.cards[code] = card
                logger.info("Registered new gift card %s", code)
                store.persist()
            return store.snapshot(card), store.snapshot(store.price)

    def get_all(self) -> list[dict]:
        with self.store.lock:
            return [self.store.snapshot(card) for card in self.store.cards.values()]

    def set_status(self, code, status) -> dict:
        store = self.store
        with store.lock:
            card = self._require(code)
            if not is_valid_status(status):
                raise InvalidStatus()
            card["status"] = status
            card["updatedAt"] = utc_timestamp()
            logger.info("Gift card %s marked %s", code, status)
            store.persist()
            return store.snapshot(card)

    def set_price(self, code, amount) -> dict:
        store = self.store
        with store.lock:
            card = self._require(code)
            if not is_valid_amount(amount):
                raise InvalidAmount()
            currency = store.price["currency"] if store.price else DEFAULT_CURRENCY
            card["price"] = {"amount": amount, "currency": currency}
            card["updatedAt"] = utc_timestamp()
            store.persist()
            return store.snapshot(card)

    def stats(self) -> dict:
        with self.store.lock:
            statuses = [card.get("status") for card in self.store.cards.values()]
        return {
            "total": len(statuses),
            "accepted": statuses.count(STATUS_ACCEPTED),
            "declined": statuses.count(STATUS_DECLINED),
            "pending": statuses.count(STATUS_PENDING),
        }

    def _require(self, code) -> dict:
        card = self.store.cards.get(code) if isinstance(code, str) and code else None
        if card is None:
            raise NotFound()
        return card
