from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the giftcard_api package is importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from giftcard_api.core.security import AdminGuard, hash_password  # noqa: E402


def test_plaintext_guard_requires_exact_match():
    guard = AdminGuard("admin", "admin123")
    assert guard.authenticate("admin", "admin123") is True
    assert guard.authenticate("admin", "admin1234") is False
    assert guard.authenticate("Admin", "admin123") is False
    assert guard.authenticate("admin ", "admin123") is False


@pytest.mark.parametrize("username,password", [(None, "admin123"), ("admin", None), ("admin", 123), ([], {})])
def test_guard_denies_non_string_credentials(username, password):
    assert AdminGuard("admin", "admin123").authenticate(username, password) is False


def test_hashed_guard_ignores_plaintext_password():
    guard = AdminGuard("admin", "admin123", password_hash=hash_password("correct horse"))
    assert guard.authenticate("admin", "correct horse") is True
    assert guard.authenticate("admin", "admin123") is False


def test_malformed_hash_denies():
    guard = AdminGuard("admin", "admin123", password_hash="not-a-hash")
    assert guard.authenticate("admin", "admin123") is False
