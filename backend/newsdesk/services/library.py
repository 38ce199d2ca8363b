"""
In-memory search, filtering, sorting and selection for the news library.

Collections are fetched wholesale; everything here works on the fetched lists
and never touches the store.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import UUID

from newsdesk.errors import ValidationFailed
from newsdesk.schemas.article import LibraryFilters, LibrarySort, NewsArticleUpdate

T = TypeVar("T")

DISCARD_PROMPT = "You have unsaved changes. Are you sure you want to close?"


def _subject_mentions_type(item: Any, types: Sequence[str]) -> bool:
    subject = item.subject.lower()
    return any(t.lower() in subject for t in types)


def _type_equals(item: Any, types: Sequence[str]) -> bool:
    if not item.type:
        return False
    value = item.type.lower()
    return any(value == t.lower() for t in types)


def _type_in(item: Any, types: Sequence[str]) -> bool:
    return bool(item.type) and item.type in types


@dataclass(frozen=True)
class Collection:
    """How one article collection is searched, type-matched and sorted."""

    name: str
    search_fields: tuple[str, ...]
    type_match: Callable[[Any, Sequence[str]], bool]
    sort_fields: tuple[str, ...]


RAW_ARTICLES = Collection(
    name="news_articles",
    search_fields=("subject", "introduction", "developments", "implications"),
    type_match=_subject_mentions_type,
    sort_fields=("timestamp", "subject", "mood", "introduction", "developments", "implications", "type"),
)

WRITTEN_ARTICLES = Collection(
    name="written_articles",
    search_fields=("subject", "header", "article"),
    type_match=_type_equals,
    sort_fields=("timestamp", "created_at", "subject", "header", "mood", "type"),
)

# Article picker of the generation workspace
GENERATION_PICKER = Collection(
    name="news_articles",
    search_fields=("subject", "introduction"),
    type_match=_type_in,
    sort_fields=("timestamp", "subject"),
)


def build_predicate(filters: LibraryFilters, collection: Collection) -> Callable[[Any], bool]:
    """Turn a filter set into one predicate; unset filters always match."""
    term = filters.search.lower()
    subject = filters.subject.lower()

    def matches(item: Any) -> bool:
        if term and not any(
            term in (getattr(item, f) or "").lower() for f in collection.search_fields
        ):
            return False
        if subject and subject not in item.subject.lower():
            return False
        if filters.mood and item.mood != filters.mood:
            return False
        if filters.news_types and not collection.type_match(item, filters.news_types):
            return False
        day = item.timestamp.date()
        if filters.date_from and day < filters.date_from:
            return False
        if filters.date_to and day > filters.date_to:
            return False
        return True

    return matches


def apply_filters(items: Iterable[T], collection: Collection, *filters: LibraryFilters) -> list[T]:
    """Keep the items matching every filter set."""
    predicates = [build_predicate(f, collection) for f in filters]
    return [item for item in items if all(p(item) for p in predicates)]


def sort_articles(items: Iterable[T], collection: Collection, sort: LibrarySort) -> list[T]:
    """Stable sort on one field. Missing values sort first ascending."""
    if sort.field not in collection.sort_fields:
        raise ValidationFailed(f"Cannot sort {collection.name} by {sort.field}")

    def key(item: Any) -> tuple[bool, Any]:
        value = getattr(item, sort.field)
        return (value is not None, value)

    return sorted(items, key=key, reverse=sort.direction == "desc")


def toggle_sort(current: LibrarySort, field: str) -> LibrarySort:
    """Clicking the active column flips direction; a new column starts descending."""
    if current.field == field:
        return LibrarySort(field=field, direction="asc" if current.direction == "desc" else "desc")
    return LibrarySort(field=field, direction="desc")


def visible_ids(items: Iterable[Any]) -> list[UUID]:
    return [item.id for item in items]


class Selection:
    """Set of selected ids, kept within the currently visible ids."""

    def __init__(self, ids: Iterable[UUID] = ()):
        self._ids: set[UUID] = set(ids)

    @property
    def ids(self) -> frozenset[UUID]:
        return frozenset(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def toggle(self, item_id: UUID) -> None:
        if item_id in self._ids:
            self._ids.discard(item_id)
        else:
            self._ids.add(item_id)

    def clear(self) -> None:
        self._ids.clear()

    def prune(self, visible: Iterable[UUID]) -> None:
        """Drop ids that are no longer visible."""
        self._ids &= set(visible)

    def all_selected(self, visible: Iterable[UUID]) -> bool:
        visible_set = set(visible)
        return bool(self._ids) and self._ids == visible_set

    def select_all(self, visible: Iterable[UUID]) -> None:
        """Select every visible id, or clear when they already are all selected."""
        visible_list = list(visible)
        if self.all_selected(visible_list):
            self.clear()
        else:
            self._ids = set(visible_list)


class ArticleDraft:
    """
    Pending edits of one raw article.

    Closing with pending changes asks ``confirm`` first; nothing else tracks
    the dirty state.
    """

    def __init__(self, article_id: UUID):
        self.article_id = article_id
        self.editing = False
        self.changes: dict[str, Any] = {}

    def begin(self) -> None:
        self.editing = True

    def set(self, field: str, value: Any) -> None:
        if field not in NewsArticleUpdate.model_fields:
            raise ValidationFailed(f"{field} cannot be edited")
        self.changes[field] = value

    @property
    def has_pending_changes(self) -> bool:
        return self.editing and bool(self.changes)

    def to_update(self) -> NewsArticleUpdate:
        return NewsArticleUpdate(**self.changes)

    def reset(self) -> None:
        self.editing = False
        self.changes = {}

    def close(self, confirm: Callable[[str], bool]) -> bool:
        """Return True when the draft was closed."""
        if self.has_pending_changes and not confirm(DISCARD_PROMPT):
            return False
        self.reset()
        return True
