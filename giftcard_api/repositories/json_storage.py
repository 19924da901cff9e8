"""
JSON-file persistence adapter.

Two documents live in the data directory: ``cards.json`` (code -> card) and
``price.json`` (the global price record or ``null``). Both are rewritten in
full on every flush.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
import json
import logging

from giftcard_api.domain.cards import is_valid_amount, is_valid_currency, is_valid_status

logger = logging.getLogger(__name__)

CARDS_FILENAME = "cards.json"
PRICE_FILENAME = "price.json"


class StorageError(Exception):
    """Raised when the data files cannot be written."""


class _CorruptDocument(Exception):
    pass


class JsonStorage:
    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.cards_file = self.data_dir / CARDS_FILENAME
        self.price_file = self.data_dir / PRICE_FILENAME

    def ensure_directory(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> tuple[dict, dict | None]:
        """Read both documents. Missing files mean "no data yet"."""
        cards = self._load_document(self.cards_file, self._check_cards)
        price = self._load_document(self.price_file, self._check_price)
        if cards is None:
            cards = {}
        logger.info("Loaded %d gift cards", len(cards))
        logger.info("Loaded current price: %s", price)
        return cards, price

    def flush(self, cards: dict, price: dict | None) -> None:
        try:
            self.cards_file.write_text(json.dumps(cards, ensure_ascii=False, indent=2), encoding="utf-8")
            self.price_file.write_text(json.dumps(price, ensure_ascii=False, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"could not write data files in {self.data_dir}") from exc

    # -------------------------------------- helpers --------------------------------------
    def _load_document(self, path: Path, check):
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            check(data)
        except (OSError, ValueError, _CorruptDocument):
            logger.exception("Error loading %s; starting without it", path)
            self._quarantine(path)
            return None
        return data

    @staticmethod
    def _check_cards(data) -> None:
        if not isinstance(data, dict):
            raise _CorruptDocument("cards document must be an object")
        for code, card in data.items():
            if not isinstance(card, dict):
                raise _CorruptDocument(f"card {code!r} must be an object")
            if not is_valid_status(card.get("status")):
                raise _CorruptDocument(f"card {code!r} has an unknown status")

    @staticmethod
    def _check_price(data) -> None:
        if data is None:
            return
        if not isinstance(data, dict):
            raise _CorruptDocument("price document must be an object or null")
        if not is_valid_amount(data.get("amount")) or not is_valid_currency(data.get("currency")):
            raise _CorruptDocument("price record needs a valid amount and currency")

    def _quarantine(self, path: Path) -> None:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        target = path.with_name(f"{path.name}.corrupt-{stamp}")
        try:
            path.replace(target)
        except OSError:
            logger.exception("Could not move %s aside", path)
            return
        logger.warning("Moved unreadable %s to %s", path.name, target)
