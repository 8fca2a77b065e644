"""Testing support – fakes for the CDN integration, clock and object cache."""

from headless_toolkit.testing.fakes import (
    FakeCdnIntegration,
    FakeClock,
    FrozenClock,
    InMemoryObjectCacheStore,
)

__all__ = [
    "FakeCdnIntegration",
    "FakeClock",
    "FrozenClock",
    "InMemoryObjectCacheStore",
]
