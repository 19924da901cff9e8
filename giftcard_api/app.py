import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from giftcard_api.core.config import Settings, get_settings
from giftcard_api.core.log import configure_logging
from giftcard_api.core.security import AdminGuard
from giftcard_api.repositories.json_storage import JsonStorage
from giftcard_api.routers import admin as admin_router
from giftcard_api.routers import pages as pages_router
from giftcard_api.routers import public as public_router
from giftcard_api.services.card_service import CardService
from giftcard_api.services.errors import GiftCardError
from giftcard_api.services.price_service import PriceService
from giftcard_api.services.store import GiftCardStore

logger = logging.getLogger("giftcard_api")


def _failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    app.state.store.load()
    logger.info("Gift Card Validator server running on port %s", settings.port)
    logger.info("Customer interface: http://localhost:%s", settings.port)
    logger.info("Admin interface: http://localhost:%s/admin", settings.port)
    logger.info("Admin username: %s", settings.admin_username)
    if settings.uses_default_credentials:
        logger.warning("Using the default admin credentials; set ADMIN_USERNAME/ADMIN_PASSWORD")
    yield
    app.state.store.shutdown()


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GiftCardError)
    async def gift_card_error(request: Request, exc: GiftCardError):
        return _failure(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return _failure("Endpoint not found", 404)
        return _failure(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _failure("Something went wrong!", 500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app with its own store; compatible with uvicorn --factory."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Gift Card Validator API", lifespan=lifespan)
    store = GiftCardStore(JsonStorage(settings.data_dir))
    app.state.settings = settings
    app.state.store = store
    app.state.guard = AdminGuard.from_settings(settings)
    app.state.card_service = CardService(store)
    app.state.price_service = PriceService(store)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)

    app.include_router(public_router.router)
    app.include_router(admin_router.router)
    app.include_router(pages_router.router)
    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    return app
