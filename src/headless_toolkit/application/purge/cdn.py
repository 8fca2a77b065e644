"""Application purge – CdnIntegration port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["CdnIntegration"]


@runtime_checkable
class CdnIntegration(Protocol):
    """Port: the external CDN integration that can purge a whole domain."""

    def is_enabled(self) -> bool: ...
    async def purge_everything(self) -> None: ...
