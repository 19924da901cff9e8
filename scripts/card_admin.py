#!/usr/bin/env python3
"""
Inspect or edit gift cards directly in the data directory (server stopped).

Usage:
  python scripts/card_admin.py [--data-dir ./data] list
  python scripts/card_admin.py stats
  python scripts/card_admin.py set-status ABC123 accepted
  python scripts/card_admin.py set-price ABC123 25
  python scripts/card_admin.py set-global-price 9.99 EUR
  python scripts/card_admin.py hash-password "new admin password"
"""
from __future__ import annotations

import argparse
import json
import sys

from giftcard_api.core.config import get_settings
from giftcard_api.core.log import configure_logging
from giftcard_api.core.security import hash_password
from giftcard_api.repositories.json_storage import JsonStorage
from giftcard_api.services.card_service import CardService
from giftcard_api.services.errors import GiftCardError
from giftcard_api.services.price_service import PriceService
from giftcard_api.services.store import GiftCardStore


def _number(value: str):
    try:
        return int(value)
    except ValueError:
        return float(value)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage gift cards offline")
    ap.add_argument("--data-dir", help="Data directory (default: DATA_DIR or ./data)")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Print every card")
    sub.add_parser("stats", help="Print counts by status")
    p = sub.add_parser("set-status", help="Accept/decline a card")
    p.add_argument("code")
    p.add_argument("status")
    p = sub.add_parser("set-price", help="Set a card price (global currency)")
    p.add_argument("code")
    p.add_argument("amount", type=_number)
    p = sub.add_parser("set-global-price", help="Set the global price")
    p.add_argument("amount", type=_number)
    p.add_argument("currency")
    p = sub.add_parser("hash-password", help="Print an Argon2 hash for ADMIN_PASSWORD_HASH")
    p.add_argument("password")
    return ap


def run(argv: list[str] | None = None) -> dict | list | str:
    args = build_parser().parse_args(argv)
    if args.command == "hash-password":
        return hash_password(args.password)

    data_dir = args.data_dir or get_settings().data_dir
    store = GiftCardStore(JsonStorage(data_dir))
    store.load()
    cards = CardService(store)
    prices = PriceService(store)

    if args.command == "list":
        return cards.get_all()
    if args.command == "stats":
        return cards.stats()
    if args.command == "set-status":
        return cards.set_status(args.code, args.status)
    if args.command == "set-price":
        return cards.set_price(args.code, args.amount)
    return prices.set(args.amount, args.currency)


def main() -> None:
    configure_logging("WARNING")
    result = run()
    if isinstance(result, str):
        print(result)
        return
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    try:
        main()
    except GiftCardError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        raise SystemExit(1)
    except Exception as exc:  # pragma: no cover - CLI use
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
