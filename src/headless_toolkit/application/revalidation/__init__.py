"""Application revalidation – frontend tag revalidation webhook."""
from headless_toolkit.application.revalidation.dispatcher import RevalidationDispatcher
from headless_toolkit.application.revalidation.guard import ContentGuard, GuardPredicate
from headless_toolkit.application.revalidation.request import RevalidationRequest

__all__ = [
    "ContentGuard",
    "GuardPredicate",
    "RevalidationDispatcher",
    "RevalidationRequest",
]
