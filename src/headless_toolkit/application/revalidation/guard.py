"""Application revalidation – ContentGuard."""
from __future__ import annotations

from typing import Callable, Iterable

from headless_toolkit.config.settings.base import DEFAULT_CONTENT_KINDS
from headless_toolkit.kernel.content import ContentChangeEvent

__all__ = ["ContentGuard", "GuardPredicate"]

GuardPredicate = Callable[[ContentChangeEvent], bool]


class ContentGuard:
    """Decides whether a post save is eligible to invalidate downstream caches.

    Only post saves are filtered: autosaves, revisions, non-public statuses
    and content kinds outside ``allowed_kinds`` are rejected, then every
    injected predicate must agree. Deletions, terms and menus always pass.
    """

    def __init__(
        self,
        allowed_kinds: Iterable[str] = DEFAULT_CONTENT_KINDS,
        public_statuses: Iterable[str] = ("publish",),
        predicates: Iterable[GuardPredicate] = (),
    ) -> None:
        self._allowed_kinds = frozenset(allowed_kinds)
        self._public_statuses = frozenset(public_statuses)
        self._predicates: list[GuardPredicate] = list(predicates)

    @property
    def allowed_kinds(self) -> frozenset[str]:
        return self._allowed_kinds

    def allow_kind(self, *kinds: str) -> None:
        self._allowed_kinds = self._allowed_kinds | frozenset(kinds)

    def add_predicate(self, predicate: GuardPredicate) -> None:
        self._predicates.append(predicate)

    def allows(self, event: ContentChangeEvent) -> bool:
        if event.is_delete or not event.is_post:
            return True
        if event.is_autosave or event.is_revision:
            return False
        if event.status not in self._public_statuses:
            return False
        if event.content_kind not in self._allowed_kinds:
            return False
        return all(predicate(event) for predicate in self._predicates)
