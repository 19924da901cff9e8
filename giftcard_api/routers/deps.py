"""Request-scoped helpers shared by the API routers."""
from __future__ import annotations

import json

from fastapi import Depends, Request

from giftcard_api.core.security import AdminGuard
from giftcard_api.services.card_service import CardService
from giftcard_api.services.errors import InvalidBody, Unauthorized
from giftcard_api.services.price_service import PriceService


def _app_state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} not configured")
    return value


def get_card_service(request: Request) -> CardService:
    return _app_state(request, "card_service")


def get_price_service(request: Request) -> PriceService:
    return _app_state(request, "price_service")


def get_guard(request: Request) -> AdminGuard:
    return _app_state(request, "guard")


async def json_body(request: Request) -> dict:
    """Parsed JSON object body; an empty body reads as {}."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise InvalidBody()
    if not isinstance(data, dict):
        raise InvalidBody()
    return data


def require_admin(payload: dict = Depends(json_body), guard: AdminGuard = Depends(get_guard)) -> str:
    """Credentials travel in every admin request body."""
    username = payload.get("username")
    if not guard.authenticate(username, payload.get("password")):
        raise Unauthorized()
    return username
