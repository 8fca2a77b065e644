"""Application invalidation – InvalidationPipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable

from headless_toolkit.application.purge.coordinator import CdnPurgeCoordinator
from headless_toolkit.application.revalidation.dispatcher import RevalidationDispatcher
from headless_toolkit.kernel.content import CacheTag, ContentChangeEvent, UnitOfWork, UnitOfWorkContext
from headless_toolkit.observability.logging import get_logger

__all__ = [
    "PURGE_PRIORITY",
    "REVALIDATION_PRIORITY",
    "InvalidationHandler",
    "InvalidationPipeline",
]

_log = get_logger(__name__)

REVALIDATION_PRIORITY = 10
PURGE_PRIORITY = 20

#: ``async (event, unit, extra_tags) -> Any``
InvalidationHandler = Callable[[ContentChangeEvent, UnitOfWork, tuple[CacheTag, ...]], Awaitable[Any]]


@dataclass(frozen=True)
class _Registration:
    priority: int
    order: int
    name: str
    handler: InvalidationHandler


class InvalidationPipeline:
    """Runs every registered cache layer for a content-change event, by priority.

    Lower priorities run first; equal priorities keep registration order. A
    handler that raises is logged and the remaining handlers still run, so a
    failing layer never reaches the event source.
    """

    def __init__(self) -> None:
        self._registrations: list[_Registration] = []

    @classmethod
    def standard(
        cls,
        dispatcher: RevalidationDispatcher,
        coordinator: CdnPurgeCoordinator,
    ) -> "InvalidationPipeline":
        """Revalidation first, CDN purge second."""
        pipeline = cls()

        async def revalidate(event: ContentChangeEvent, unit: UnitOfWork, extra: tuple[CacheTag, ...]) -> Any:  # noqa: ARG001
            return await dispatcher.handle(event, extra)

        async def purge(event: ContentChangeEvent, unit: UnitOfWork, extra: tuple[CacheTag, ...]) -> Any:  # noqa: ARG001
            return await coordinator.handle(event, unit)

        pipeline.register(revalidate, REVALIDATION_PRIORITY, name="revalidation")
        pipeline.register(purge, PURGE_PRIORITY, name="cdn_purge")
        return pipeline

    def register(self, handler: InvalidationHandler, priority: int, *, name: str | None = None) -> None:
        self._registrations.append(
            _Registration(
                priority=priority,
                order=len(self._registrations),
                name=name or getattr(handler, "__qualname__", repr(handler)),
                handler=handler,
            )
        )
        self._registrations.sort(key=lambda r: (r.priority, r.order))

    @property
    def handler_names(self) -> list[str]:
        return [r.name for r in self._registrations]

    async def notify(
        self,
        event: ContentChangeEvent,
        unit: UnitOfWork | None = None,
        extra_tags: Iterable[CacheTag] = (),
    ) -> None:
        unit = unit or UnitOfWorkContext.current()
        extra = tuple(extra_tags)
        for registration in list(self._registrations):
            try:
                await registration.handler(event, unit, extra)
            except Exception:  # noqa: BLE001
                _log.warning(
                    "invalidation_handler_failed",
                    handler=registration.name,
                    entity_kind=str(event.entity_kind),
                    entity_id=event.entity_id,
                    exc_info=True,
                )
