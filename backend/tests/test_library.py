"""Tests for in-memory library filtering, sorting, selection and drafts."""

from datetime import date, datetime
from uuid import uuid4

import pytest

from newsdesk.errors import ValidationFailed
from newsdesk.schemas.article import (
    LibraryFilters,
    LibrarySort,
    NewsArticleResponse,
    WrittenArticleResponse,
)
from newsdesk.services.library import (
    DISCARD_PROMPT,
    GENERATION_PICKER,
    RAW_ARTICLES,
    WRITTEN_ARTICLES,
    ArticleDraft,
    Selection,
    apply_filters,
    sort_articles,
    toggle_sort,
    visible_ids,
)


def raw(subject: str, day: int, **fields: object) -> NewsArticleResponse:
    values = {
        "id": uuid4(),
        "subject": subject,
        "mood": "neutral",
        "introduction": "",
        "developments": "",
        "implications": "",
        "timestamp": datetime(2024, 3, day, 12, 0),
    }
    values.update(fields)
    return NewsArticleResponse(**values)


def written(subject: str, day: int, **fields: object) -> WrittenArticleResponse:
    values = {
        "id": uuid4(),
        "subject": subject,
        "header": "",
        "article": "",
        "mood": "neutral",
        "timestamp": datetime(2024, 3, day, 12, 0),
        "created_at": datetime(2024, 3, day, 13, 0),
    }
    values.update(fields)
    return WrittenArticleResponse(**values)


@pytest.fixture
def articles() -> list[NewsArticleResponse]:
    return [
        raw("Markets rally - financial - stocks news", 1, mood="positive"),
        raw("Court ruling on data law", 2, introduction="legal - law news digest", mood="negative"),
        raw("Election updates", 3, developments="Polls close at eight"),
        raw("Mainstream news roundup", 4, implications="Expect more RALLY coverage"),
    ]


class TestFilters:
    """Search and structured filters."""

    def test_search_is_case_insensitive_over_fields(
        self, articles: list[NewsArticleResponse]
    ) -> None:
        found = apply_filters(articles, RAW_ARTICLES, LibraryFilters(search="rally"))
        assert [a.subject for a in found] == [articles[0].subject, articles[3].subject]

    def test_written_search_fields(self) -> None:
        items = [written("A", 1, header="Big News"), written("B", 2, article="nothing")]
        found = apply_filters(items, WRITTEN_ARTICLES, LibraryFilters(search="big"))
        assert [a.subject for a in found] == ["A"]

    def test_raw_type_matches_subject(self, articles: list[NewsArticleResponse]) -> None:
        filters = LibraryFilters(news_types=["financial - stocks news", "updates"])
        found = apply_filters(articles, RAW_ARTICLES, filters)
        assert [a.subject for a in found] == [articles[0].subject, articles[2].subject]

    def test_written_type_equals_case_insensitive(self) -> None:
        items = [written("A", 1, type="Updates"), written("B", 2, type="updates weekly"), written("C", 3)]
        found = apply_filters(items, WRITTEN_ARTICLES, LibraryFilters(news_types=["updates"]))
        assert [a.subject for a in found] == ["A"]

    def test_mood_and_subject(self, articles: list[NewsArticleResponse]) -> None:
        assert apply_filters(articles, RAW_ARTICLES, LibraryFilters(mood="negative")) == [
            articles[1]
        ]
        assert apply_filters(articles, RAW_ARTICLES, LibraryFilters(subject="ELECTION")) == [
            articles[2]
        ]

    def test_date_range_is_inclusive(self, articles: list[NewsArticleResponse]) -> None:
        filters = LibraryFilters(date_from=date(2024, 3, 2), date_to=date(2024, 3, 3))
        assert apply_filters(articles, RAW_ARTICLES, filters) == articles[1:3]

    def test_composition_is_conjunctive_and_idempotent(
        self, articles: list[NewsArticleResponse]
    ) -> None:
        a = LibraryFilters(search="rally")
        b = LibraryFilters(date_from=date(2024, 3, 2))
        combined = apply_filters(articles, RAW_ARTICLES, a, b)
        assert combined == apply_filters(apply_filters(articles, RAW_ARTICLES, a), RAW_ARTICLES, b)
        assert combined == [articles[3]]
        assert apply_filters(combined, RAW_ARTICLES, a) == combined

    def test_no_filters_keeps_everything(self, articles: list[NewsArticleResponse]) -> None:
        assert apply_filters(articles, RAW_ARTICLES, LibraryFilters()) == articles

    def test_generation_picker(self, articles: list[NewsArticleResponse]) -> None:
        items = articles + [raw("Typed", 5, type="updates")]
        found = apply_filters(items, GENERATION_PICKER, LibraryFilters(news_types=["updates"]))
        assert [a.subject for a in found] == ["Typed"]
        # Developments are not searched by the picker
        assert apply_filters(items, GENERATION_PICKER, LibraryFilters(search="polls")) == []


class TestSort:
    def test_default_is_newest_first(self, articles: list[NewsArticleResponse]) -> None:
        ordered = sort_articles(articles, RAW_ARTICLES, LibrarySort())
        assert ordered == list(reversed(articles))

    def test_toggle_reverses_and_restores(self, articles: list[NewsArticleResponse]) -> None:
        sort = LibrarySort(field="subject", direction="asc")
        first = sort_articles(articles, RAW_ARTICLES, sort)
        flipped = toggle_sort(sort, "subject")
        assert flipped.direction == "desc"
        assert sort_articles(articles, RAW_ARTICLES, flipped) == list(reversed(first))
        assert toggle_sort(flipped, "subject") == sort

    def test_new_field_starts_descending(self) -> None:
        sort = LibrarySort(field="subject", direction="asc")
        assert toggle_sort(sort, "mood") == LibrarySort(field="mood", direction="desc")

    def test_missing_values_first_ascending(self) -> None:
        items = [raw("A", 1, type="x"), raw("B", 2), raw("C", 3, type="a")]
        ordered = sort_articles(items, RAW_ARTICLES, LibrarySort(field="type", direction="asc"))
        assert [a.subject for a in ordered] == ["B", "C", "A"]

    def test_stable_for_equal_values(self, articles: list[NewsArticleResponse]) -> None:
        ordered = sort_articles(articles, RAW_ARTICLES, LibrarySort(field="type", direction="asc"))
        assert ordered == articles

    def test_unknown_field(self, articles: list[NewsArticleResponse]) -> None:
        with pytest.raises(ValidationFailed):
            sort_articles(articles, RAW_ARTICLES, LibrarySort(field="header"))


class TestSelection:
    def test_toggle(self) -> None:
        item = uuid4()
        selection = Selection()
        selection.toggle(item)
        assert item in selection
        selection.toggle(item)
        assert len(selection) == 0

    def test_prune_keeps_intersection(self) -> None:
        a, b, c, d = uuid4(), uuid4(), uuid4(), uuid4()
        selection = Selection([a, b, c])
        selection.prune([b, c, d])
        assert selection.ids == frozenset({b, c})

    def test_select_all_then_clear(self, articles: list[NewsArticleResponse]) -> None:
        visible = visible_ids(articles)
        selection = Selection(visible[:2])
        assert not selection.all_selected(visible)
        selection.select_all(visible)
        assert selection.ids == frozenset(visible)
        assert selection.all_selected(visible)
        selection.select_all(visible)
        assert len(selection) == 0

    def test_empty_selection_is_not_all_selected(self) -> None:
        assert not Selection().all_selected([])


class TestArticleDraft:
    def test_close_without_changes_needs_no_confirmation(self) -> None:
        draft = ArticleDraft(uuid4())
        draft.begin()

        def refuse(message: str) -> bool:
            raise AssertionError("should not ask")

        assert draft.close(refuse)

    def test_close_with_changes_asks(self) -> None:
        draft = ArticleDraft(uuid4())
        draft.begin()
        draft.set("subject", "New subject")
        prompts: list[str] = []

        def decline(message: str) -> bool:
            prompts.append(message)
            return False

        assert not draft.close(decline)
        assert prompts == [DISCARD_PROMPT]
        assert draft.has_pending_changes
        assert draft.close(lambda message: True)
        assert not draft.has_pending_changes

    def test_to_update_only_carries_changed_fields(self) -> None:
        draft = ArticleDraft(uuid4())
        draft.begin()
        draft.set("mood", "positive")
        assert draft.to_update().model_dump(exclude_unset=True) == {"mood": "positive"}

    def test_rejects_unknown_field(self) -> None:
        with pytest.raises(ValidationFailed):
            ArticleDraft(uuid4()).set("timestamp", "now")
