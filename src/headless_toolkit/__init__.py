"""
headless_toolkit – cache invalidation and preview access for decoupled frontends.

Import path convention::

    from headless_toolkit.kernel.content import ContentChangeEvent
    from headless_toolkit.application.invalidation import InvalidationPipeline
    from headless_toolkit.security.preview import PreviewTokenService
    from headless_toolkit.bootstrap import build_toolkit
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
