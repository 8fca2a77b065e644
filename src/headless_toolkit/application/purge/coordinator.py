"""Application purge – CdnPurgeCoordinator."""
from __future__ import annotations

from headless_toolkit.application.cache.response import ResponseCache
from headless_toolkit.application.purge.cdn import CdnIntegration
from headless_toolkit.application.revalidation.guard import ContentGuard
from headless_toolkit.kernel.content import ContentChangeEvent, UnitOfWork
from headless_toolkit.observability.events import CDN_PURGED, EventEmitter, StructuredEvent
from headless_toolkit.observability.logging import get_logger

__all__ = ["CdnPurgeCoordinator"]

_log = get_logger(__name__)


class CdnPurgeCoordinator:
    """Full-domain CDN purge plus response-cache flush, once per unit of work.

    The CDN prerequisites are checked once, at construction: without an
    integration, or with one that reports purging disabled, the coordinator
    stays inert.
    """

    def __init__(
        self,
        cdn: CdnIntegration | None,
        *,
        response_cache: ResponseCache,
        guard: ContentGuard | None = None,
        emitter: EventEmitter | None = None,
    ) -> None:
        self._cdn = cdn
        self._cache = response_cache
        self._guard = guard or ContentGuard()
        self._emitter = emitter or EventEmitter()
        self._active = cdn is not None and bool(cdn.is_enabled())
        if not self._active:
            _log.debug("cdn_purge_inert", cdn_present=cdn is not None)

    @property
    def active(self) -> bool:
        return self._active

    async def handle(self, event: ContentChangeEvent, unit: UnitOfWork) -> bool:
        if not self._active:
            return False
        if not self._guard.allows(event):
            return False
        return await self.purge(unit)

    async def purge(self, unit: UnitOfWork) -> bool:
        """Purge unless *unit* already purged; returns whether a purge ran."""
        cdn = self._cdn
        if not self._active or cdn is None or unit.purge_requested:
            return False
        unit.purge_requested = True

        try:
            await cdn.purge_everything()
        except Exception as exc:  # noqa: BLE001
            _log.warning("cdn_purge_failed", unit_of_work=unit.id, error=str(exc))
        try:
            await self._cache.flush()
        except Exception as exc:  # noqa: BLE001
            _log.warning("response_cache_flush_failed", unit_of_work=unit.id, error=str(exc))

        _log.info("cdn_purged", unit_of_work=unit.id)
        self._emitter.emit(StructuredEvent(name=CDN_PURGED))
        return True
