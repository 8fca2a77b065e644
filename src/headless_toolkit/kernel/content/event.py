"""Kernel content – ContentChangeEvent and its enums."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

__all__ = ["CacheTag", "ChangeType", "ContentChangeEvent", "EntityKind"]

#: Opaque label identifying a slice of cached content invalidated together.
CacheTag = str


class EntityKind(str, Enum):
    POST = "post"
    TERM = "term"
    MENU = "menu"


class ChangeType(str, Enum):
    SAVE = "save"
    DELETE = "delete"


@dataclass(frozen=True)
class ContentChangeEvent:
    """Notification that a piece of CMS content was created, updated or removed.

    ``content_kind`` is the post type for :attr:`EntityKind.POST` events
    (``post``, ``page`` or any custom kind) and ``taxonomy`` names the
    taxonomy of a :attr:`EntityKind.TERM` event.
    """

    entity_kind: EntityKind
    entity_id: int
    status: str = ""
    taxonomy_terms: tuple[tuple[str, str], ...] = ()
    content_kind: str = "post"
    taxonomy: str = ""
    change: ChangeType = ChangeType.SAVE
    is_autosave: bool = False
    is_revision: bool = False

    @property
    def is_delete(self) -> bool:
        return self.change == ChangeType.DELETE

    @property
    def is_post(self) -> bool:
        return self.entity_kind == EntityKind.POST

    @classmethod
    def post(
        cls,
        entity_id: int,
        *,
        content_kind: str = "post",
        status: str = "publish",
        terms: Iterable[tuple[str, str]] = (),
        change: ChangeType = ChangeType.SAVE,
        is_autosave: bool = False,
        is_revision: bool = False,
    ) -> "ContentChangeEvent":
        return cls(
            entity_kind=EntityKind.POST,
            entity_id=entity_id,
            status=status,
            taxonomy_terms=tuple((str(tax), str(slug)) for tax, slug in terms),
            content_kind=content_kind,
            change=change,
            is_autosave=is_autosave,
            is_revision=is_revision,
        )

    @classmethod
    def term(
        cls,
        term_id: int,
        taxonomy: str,
        *,
        change: ChangeType = ChangeType.SAVE,
    ) -> "ContentChangeEvent":
        return cls(
            entity_kind=EntityKind.TERM,
            entity_id=term_id,
            taxonomy=taxonomy,
            content_kind="",
            change=change,
        )

    @classmethod
    def menu(cls, menu_id: int) -> "ContentChangeEvent":
        return cls(entity_kind=EntityKind.MENU, entity_id=menu_id, content_kind="")
