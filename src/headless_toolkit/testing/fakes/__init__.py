"""Testing fakes – in-memory doubles for the toolkit's ports."""
from headless_toolkit.application.cache.store import InMemoryObjectCacheStore
from headless_toolkit.kernel.time import FrozenClock
from headless_toolkit.testing.fakes.cdn import FakeCdnIntegration
from headless_toolkit.testing.fakes.clock import FakeClock

__all__ = [
    "FakeCdnIntegration",
    "FakeClock",
    "FrozenClock",
    "InMemoryObjectCacheStore",
]
