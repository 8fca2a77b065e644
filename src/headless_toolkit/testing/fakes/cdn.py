"""Testing fakes – FakeCdnIntegration."""
from __future__ import annotations


class FakeCdnIntegration:
    """Records purge calls; optionally reports disabled or fails every purge."""

    def __init__(self, *, enabled: bool = True, fail_with: Exception | None = None) -> None:
        self.enabled = enabled
        self.fail_with = fail_with
        self.purge_calls = 0

    def is_enabled(self) -> bool:
        return self.enabled

    async def purge_everything(self) -> None:
        self.purge_calls += 1
        if self.fail_with is not None:
            raise self.fail_with


__all__ = ["FakeCdnIntegration"]
