"""Application cache – ResponseCacheKey builder."""
from __future__ import annotations

import hashlib
import json
from typing import Any

__all__ = ["ResponseCacheKey"]


class ResponseCacheKey:
    """Factory for deterministic query-response cache keys."""

    @staticmethod
    def canonical_variables(variables: Any) -> str:
        if variables is None:
            return ""
        if isinstance(variables, (dict, list, tuple)):
            return json.dumps(variables, sort_keys=True, separators=(",", ":"), default=str)
        return str(variables)

    @classmethod
    def for_query(cls, query: str, variables: Any = None) -> str:
        # sha256 over "<query>|<canonical variables>"
        material = f"{query}|{cls.canonical_variables(variables)}"
        return hashlib.sha256(material.encode("utf-8")).hexdigest()
