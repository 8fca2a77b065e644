"""Security – preview tokens for authenticated draft access (PyJWT-backed)."""
from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Any

import jwt as pyjwt
from jwt.utils import base64url_encode

from headless_toolkit.config.settings.base import DEFAULT_TOKEN_EXPIRY
from headless_toolkit.kernel.time import Clock, SystemClock, unix_now
from headless_toolkit.observability.logging import get_logger

__all__ = ["PreviewTokenPayload", "PreviewTokenService"]

_log = get_logger(__name__)

ALGORITHM = "HS256"


@dataclass(frozen=True)
class PreviewTokenPayload:
    entity_id: int
    actor_id: int
    issued_at: int | None
    expires_at: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "entity_id": self.entity_id,
            "actor_id": self.actor_id,
            "iat": self.issued_at,
            "exp": self.expires_at,
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PreviewTokenService:
    """Issues and verifies short-lived HS256 tokens for draft previews.

    Tokens are stateless: validity depends only on the signature and the
    ``exp`` claim. :meth:`verify` returns ``None`` for every failure, whether
    the token is malformed, tampered with or expired, so callers cannot leak
    which check failed.
    """

    def __init__(
        self,
        secret: str | None,
        *,
        clock: Clock | None = None,
        default_ttl: int = DEFAULT_TOKEN_EXPIRY,
    ) -> None:
        self._secret = secret or ""
        self._clock = clock or SystemClock()
        self._default_ttl = max(1, int(default_ttl))

    @property
    def configured(self) -> bool:
        return bool(self._secret)

    def issue(self, entity_id: int, actor_id: int, ttl_seconds: int | None = None) -> str:
        ttl = self._default_ttl if ttl_seconds is None else max(1, int(ttl_seconds))
        now = unix_now(self._clock)
        payload = {
            "entity_id": int(entity_id),
            "actor_id": int(actor_id),
            "iat": now,
            "exp": now + ttl,
        }
        return pyjwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Any) -> PreviewTokenPayload | None:
        if not isinstance(token, str) or not self._secret:
            return None
        segments = token.split(".")
        if len(segments) != 3:
            return None
        header, body, signature = segments

        try:
            expected = self._sign(f"{header}.{body}")
            provided = signature.encode("ascii")
        except UnicodeError:
            # base64url segments are ASCII; anything else cannot carry our signature
            return None
        if not hmac.compare_digest(expected, provided):
            return None

        try:
            claims = pyjwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "verify_iat": False, "verify_nbf": False},
            )
        except (pyjwt.PyJWTError, ValueError) as exc:
            _log.debug("preview_token_undecodable", error=type(exc).__name__)
            return None

        exp = claims.get("exp")
        if not _is_int(exp) or exp < unix_now(self._clock):
            return None
        entity_id, actor_id = claims.get("entity_id"), claims.get("actor_id")
        if not _is_int(entity_id) or not _is_int(actor_id):
            return None
        iat = claims.get("iat")
        return PreviewTokenPayload(
            entity_id=entity_id,
            actor_id=actor_id,
            issued_at=iat if _is_int(iat) else None,
            expires_at=exp,
        )

    def _sign(self, signing_input: str) -> bytes:
        digest = hmac.new(self._secret.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha256).digest()
        return base64url_encode(digest)
