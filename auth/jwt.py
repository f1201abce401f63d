"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Optional

from auth.exceptions import TokenExpiredError, TokenMalformedError
from config.settings import config


def _sign(raw: bytes) -> str:
    return hmac.new(config.jwt_secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: str, expires_in: Optional[int] = None) -> str:
    """Create a signed token containing ``user_id``, issue time and expiry."""
    now = int(time.time())
    lifetime = config.jwt_expiry_seconds if expires_in is None else expires_in
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + lifetime,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(raw)


def verify_token(token: str) -> str:
    """
    Verify token and return ``user_id``.

    Raises ``TokenMalformedError`` when the token cannot be decoded or the
    signature does not match, ``TokenExpiredError`` once ``exp`` is reached.
    """
    parts = token.split(".")
    if len(parts) != 2:
        raise TokenMalformedError()
    encoded, sig = parts

    try:
        raw = urlsafe_b64decode(encoded.encode())
    except (binascii.Error, ValueError):
        raise TokenMalformedError()

    if not hmac.compare_digest(sig.encode(), _sign(raw).encode()):
        raise TokenMalformedError()

    try:
        payload = json.loads(raw)
        user_id = payload["user_id"]
        exp = int(payload["exp"])
    except (ValueError, KeyError, TypeError):
        raise TokenMalformedError()

    if not isinstance(user_id, str) or not user_id:
        raise TokenMalformedError()
    if time.time() >= exp:
        raise TokenExpiredError()
    return user_id
