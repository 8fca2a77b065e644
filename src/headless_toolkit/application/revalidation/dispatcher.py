"""Application revalidation – RevalidationDispatcher sends tags to the frontend."""
from __future__ import annotations

import asyncio
import concurrent.futures
import threading
import time
from typing import Any, Coroutine, Iterable

import httpx

from headless_toolkit.application.cache.tags import TagDeriver
from headless_toolkit.application.revalidation.guard import ContentGuard
from headless_toolkit.application.revalidation.request import RevalidationRequest
from headless_toolkit.kernel.content import CacheTag, ContentChangeEvent
from headless_toolkit.observability.events import REVALIDATION_SENT, EventEmitter, StructuredEvent
from headless_toolkit.observability.logging import get_logger

__all__ = ["RevalidationDispatcher"]

_log = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class _DeliveryLoop:
    """Event loop on a daemon thread that outlives the caller's own loop."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    def submit(self, coro: Coroutine[Any, Any, None]) -> concurrent.futures.Future[None]:
        with self._lock:
            if self._loop is None or self._thread is None or not self._thread.is_alive():
                self._loop = asyncio.new_event_loop()
                self._thread = threading.Thread(
                    target=self._run, args=(self._loop,), name=self._name, daemon=True
                )
                self._thread.start()
            loop = self._loop
        return asyncio.run_coroutine_threadsafe(coro, loop)

    @staticmethod
    def _run(loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        loop.run_forever()


class RevalidationDispatcher:
    """Fire-and-forget POST of cache tags to the frontend revalidation endpoint.

    :meth:`dispatch` hands delivery to a loop on a dedicated daemon thread and
    returns immediately, so a caller that runs the pipeline under a
    short-lived ``asyncio.run`` cannot cancel the request by closing its loop.
    Delivery is best effort: no retries, and failures only surface as a
    ``revalidation.sent`` event carrying an ``error`` field.
    """

    def __init__(
        self,
        endpoint: str | None,
        secret: str | None,
        *,
        deriver: TagDeriver | None = None,
        guard: ContentGuard | None = None,
        emitter: EventEmitter | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint or ""
        self._secret = secret or ""
        self._deriver = deriver or TagDeriver()
        self._guard = guard or ContentGuard()
        self._emitter = emitter or EventEmitter()
        self._timeout = timeout
        self._transport = transport
        self._delivery = _DeliveryLoop("revalidation-dispatch")
        self._pending: set[concurrent.futures.Future[None]] = set()

    @property
    def configured(self) -> bool:
        return bool(self._endpoint) and bool(self._secret)

    async def handle(
        self,
        event: ContentChangeEvent,
        extra_tags: Iterable[CacheTag] = (),
    ) -> RevalidationRequest | None:
        """Guard, derive tags and dispatch for one content-change event."""
        if not self.configured:
            return None
        if not self._guard.allows(event):
            _log.debug("revalidation_skipped", entity_id=event.entity_id, status=event.status)
            return None
        return self.dispatch(self._deriver.derive(event, extra_tags))

    def dispatch(self, tags: Iterable[CacheTag]) -> RevalidationRequest | None:
        if not self.configured:
            return None
        request = RevalidationRequest(
            tags=tuple(tags),
            secret=self._secret,
            endpoint=self._endpoint,
        )
        future = self._delivery.submit(self._deliver(request))
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)
        return request

    async def drain(self) -> None:
        """Wait for in-flight deliveries from inside a running loop."""
        pending = [asyncio.wrap_future(f) for f in list(self._pending)]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def join(self, timeout: float | None = None) -> bool:
        """Block until in-flight deliveries finish; ``False`` on timeout."""
        _, not_done = concurrent.futures.wait(list(self._pending), timeout=timeout)
        return not not_done

    async def _deliver(self, request: RevalidationRequest) -> None:
        fields: dict[str, Any] = {"tags": list(request.tags), "endpoint": request.endpoint}
        t0 = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(
                    request.endpoint,
                    content=request.encode(),
                    headers={"Content-Type": "application/json"},
                )
            fields["status_code"] = resp.status_code
            _log.info("revalidation_sent", endpoint=request.endpoint, tags=fields["tags"], status_code=resp.status_code)
        except asyncio.CancelledError:
            fields["error"] = "cancelled"
            _log.warning("revalidation_cancelled", endpoint=request.endpoint, tags=fields["tags"])
            raise
        except Exception as exc:  # noqa: BLE001
            fields["error"] = str(exc) or type(exc).__name__
            _log.warning("revalidation_failed", endpoint=request.endpoint, tags=fields["tags"], error=fields["error"])
        finally:
            self._emitter.emit(
                StructuredEvent(
                    name=REVALIDATION_SENT,
                    duration_ms=(time.monotonic() - t0) * 1000,
                    fields=fields,
                )
            )
