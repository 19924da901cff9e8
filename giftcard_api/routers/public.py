from fastapi import APIRouter, Depends

from giftcard_api.routers.deps import get_card_service, get_price_service, json_body
from giftcard_api.services.card_service import CardService
from giftcard_api.services.price_service import PriceService

router = APIRouter(prefix="/api", tags=["public"])


@router.get("/price")
def current_price(prices: PriceService = Depends(get_price_service)):
    return {"success": True, "price": prices.get()}


@router.post("/validate")
def validate_card(payload: dict = Depends(json_body), cards: CardService = Depends(get_card_service)):
    card, global_price = cards.validate(payload.get("code"))
    return {"success": True, "card": card, "globalPrice": global_price}
