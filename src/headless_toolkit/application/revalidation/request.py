"""Application revalidation – RevalidationRequest value object."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from headless_toolkit.kernel.content import CacheTag

__all__ = ["RevalidationRequest"]


@dataclass(frozen=True)
class RevalidationRequest:
    """One outbound revalidation call; built per dispatch and then discarded."""

    tags: tuple[CacheTag, ...]
    secret: str
    endpoint: str

    def to_body(self) -> dict[str, Any]:
        return {"tags": list(self.tags), "secret": self.secret}

    def encode(self) -> bytes:
        return json.dumps(self.to_body(), separators=(",", ":")).encode("utf-8")

    def __repr__(self) -> str:
        return f"RevalidationRequest(tags={self.tags!r}, endpoint={self.endpoint!r})"
