"""
In-memory gift card state shared by the registry and the price ledger.

One store is built per application instance and handed to routers through
``app.state.store``. Mutations happen under ``store.lock`` and are flushed to
disk before the lock is released.
"""
from __future__ import annotations

import copy
import logging
import threading

from giftcard_api.repositories.json_storage import JsonStorage, StorageError
from giftcard_api.services.errors import InternalError

logger = logging.getLogger(__name__)


class GiftCardStore:
    def __init__(self, storage: JsonStorage) -> None:
        self.storage = storage
        self.cards: dict[str, dict] = {}
        self.price: dict | None = None
        self.lock = threading.Lock()

    def load(self) -> None:
        self.storage.ensure_directory()
        cards, price = self.storage.load()
        with self.lock:
            self.cards = cards
            self.price = price

    def persist(self) -> None:
        """Write the whole state; callers hold ``lock``."""
        try:
            self.storage.flush(self.cards, self.price)
        except StorageError:
            logger.exception("Error saving data")
            raise InternalError()

    def shutdown(self) -> None:
        logger.info("Saving data before exit...")
        with self.lock:
            try:
                self.storage.flush(self.cards, self.price)
            except StorageError:
                logger.exception("Error saving data on shutdown")

    @staticmethod
    def snapshot(record: dict | None) -> dict | None:
        return copy.deepcopy(record)
