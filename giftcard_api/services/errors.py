"""Error taxonomy shared by the card registry and the price ledger."""
from __future__ import annotations


class GiftCardError(Exception):
    """Base class; carries the client-facing message and HTTP status."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidBody(GiftCardError):
    default_message = "Invalid JSON body"


class InvalidFormat(GiftCardError):
    default_message = "Invalid gift card format"


class InvalidStatus(GiftCardError):
    default_message = "Invalid status"


class InvalidAmount(GiftCardError):
    default_message = "Invalid price amount"


class InvalidCurrency(GiftCardError):
    default_message = "Invalid currency"


class NotFound(GiftCardError):
    status_code = 404
    default_message = "Gift card not found"


class Unauthorized(GiftCardError):
    status_code = 401
    default_message = "Invalid credentials"


class InternalError(GiftCardError):
    """Unexpected failure (e.g. disk write); detail stays in the server log."""

    status_code = 500
    default_message = "Internal server error"
