"""Kernel time – Clock port + implementations."""
from headless_toolkit.kernel.time.clock import Clock, FrozenClock, SystemClock, unix_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "unix_now"]
