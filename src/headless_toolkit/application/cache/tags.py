"""Application cache – TagDeriver: content-change events to cache tags."""
from __future__ import annotations

from typing import Callable, Iterable

from headless_toolkit.kernel.content import CacheTag, ContentChangeEvent, EntityKind

__all__ = ["TagDeriver", "TagExtender"]

#: Receives the event and the tags derived so far; returns tags to append.
TagExtender = Callable[[ContentChangeEvent, list[CacheTag]], Iterable[CacheTag]]


class TagDeriver:
    """Turns a :class:`ContentChangeEvent` into the cache tags it invalidates.

    ``extenders`` are applied in order after the built-in rules, and ``extra``
    tags passed to :meth:`derive` are appended last. Both pass through
    unchanged apart from de-duplication.
    """

    def __init__(self, extenders: Iterable[TagExtender] = ()) -> None:
        self._extenders: list[TagExtender] = list(extenders)

    def add_extender(self, extender: TagExtender) -> None:
        self._extenders.append(extender)

    def derive(self, event: ContentChangeEvent, extra: Iterable[CacheTag] = ()) -> list[CacheTag]:
        tags = self._base_tags(event)
        for extender in self._extenders:
            tags.extend(extender(event, list(tags)))
        tags.extend(extra)
        # de-duplicate, first occurrence wins
        return list(dict.fromkeys(tags))

    def _base_tags(self, event: ContentChangeEvent) -> list[CacheTag]:
        kind = event.entity_kind
        if kind == EntityKind.POST:
            label = event.content_kind or EntityKind.POST.value
            return [label, f"{label}-{event.entity_id}", *self._term_tags(event)]
        if kind == EntityKind.TERM:
            tags = [event.taxonomy] if event.taxonomy else []
            return [*tags, f"term-{event.entity_id}"]
        if kind == EntityKind.MENU:
            return ["menu", f"menu-{event.entity_id}"]
        label = event.content_kind or str(getattr(kind, "value", kind) or "") or "content"
        return [label, f"{label}-{event.entity_id}", *self._term_tags(event)]

    @staticmethod
    def _term_tags(event: ContentChangeEvent) -> list[CacheTag]:
        tags: list[CacheTag] = []
        for pair in event.taxonomy_terms or ():
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                continue
            taxonomy, slug = pair
            if taxonomy and slug:
                tags.append(f"{taxonomy}-{slug}")
        return tags
