from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from giftcard_api.routers.deps import get_card_service, get_price_service, json_body, require_admin
from giftcard_api.services.card_service import CardService
from giftcard_api.services.price_service import PriceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/login")
def login(username: str = Depends(require_admin)):
    logger.info("Admin login for %s", username)
    return {"success": True, "message": "Login successful"}


@router.post("/price")
def update_price(payload: dict = Depends(json_body), prices: PriceService = Depends(get_price_service)):
    price = prices.set(payload.get("amount"), payload.get("currency"))
    return {"success": True, "message": "Price updated successfully", "price": price}


@router.post("/cards")
def list_cards(cards: CardService = Depends(get_card_service)):
    return {"success": True, "cards": cards.get_all()}


@router.post("/cards/status")
def update_card_status(payload: dict = Depends(json_body), cards: CardService = Depends(get_card_service)):
    card = cards.set_status(payload.get("code"), payload.get("status"))
    return {"success": True, "message": "Status updated successfully", "card": card}


@router.post("/cards/price")
def update_card_price(payload: dict = Depends(json_body), cards: CardService = Depends(get_card_service)):
    card = cards.set_price(payload.get("code"), payload.get("amount"))
    return {"success": True, "message": "Price updated successfully", "card": card}


@router.post("/stats")
def stats(cards: CardService = Depends(get_card_service)):
    return {"success": True, "stats": cards.stats()}
