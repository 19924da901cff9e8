"""Admin access guard (credential verification)."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

from giftcard_api.core.config import Settings

_ph = PasswordHasher()


def hash_password(password: str) -> str:
    """Create an Argon2 hash suitable for ADMIN_PASSWORD_HASH."""
    return _ph.hash(password)


class AdminGuard:
    """Checks per-request admin credentials.

    Plaintext comparison against the configured password by default; when an
    Argon2 hash is configured it replaces the plaintext password entirely.
    """

    def __init__(self, username: str, password: str, password_hash: str = "") -> None:
        self._username = username
        self._password = password
        self._password_hash = password_hash

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdminGuard":
        return cls(settings.admin_username, settings.admin_password, settings.admin_password_hash)

    def authenticate(self, username, password) -> bool:
        if not isinstance(username, str) or not isinstance(password, str):
            return False
        if username != self._username:
            return False
        if self._password_hash:
            try:
                return _ph.verify(self._password_hash, password)
            except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
                return False
        return secrets.compare_digest(password.encode(), self._password.encode())
