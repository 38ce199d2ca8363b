"""Tests for news set configuration."""

from collections.abc import Callable
from uuid import uuid4

import httpx
import pytest
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import NotFound, ValidationFailed
from newsdesk.models import NewsSet
from newsdesk.schemas.news_set import NewsSetForm
from newsdesk.services.auth_service import CurrentUser
from newsdesk.services.news_set_service import NewsSetService


def count_writes(session: AsyncSession) -> list[str]:
    """Record INSERT/UPDATE/DELETE statements run through ``session``."""
    writes: list[str] = []

    @event.listens_for(session.bind.sync_engine, "before_cursor_execute")
    def record(conn, cursor, statement, parameters, context, executemany):  # noqa: ANN001
        if statement.lstrip().upper().startswith(("INSERT", "UPDATE", "DELETE")):
            writes.append(statement)

    return writes


class TestNewsSetService:
    """Service-level behavior against the in-memory store."""

    @pytest.mark.parametrize(
        ("form", "message"),
        [
            (NewsSetForm(name="", subject="AI"), "Name is required"),
            (NewsSetForm(name="   ", subject="AI"), "Name is required"),
            (NewsSetForm(name="Tech", subject=""), "Subject is required"),
            (
                NewsSetForm(name="Tech", subject="AI", num_articles=0),
                "Number of articles must be at least 1",
            ),
        ],
    )
    async def test_rejected_form_writes_nothing(
        self, session: AsyncSession, user: CurrentUser, form: NewsSetForm, message: str
    ) -> None:
        writes = count_writes(session)
        with pytest.raises(ValidationFailed) as exc_info:
            await NewsSetService(session).create_set(user.id, form)
        assert exc_info.value.message == message
        assert writes == []

    async def test_valid_form_writes_once(self, session: AsyncSession, user: CurrentUser) -> None:
        writes = count_writes(session)
        sets = await NewsSetService(session).create_set(
            user.id, NewsSetForm(name="Tech", subject="AI chips")
        )
        assert len(writes) == 1
        assert [s.name for s in sets] == ["Tech"]
        assert sets[0].num_articles == 5
        assert sets[0].news_type == "general news"
        assert sets[0].mood == "neutral"

    async def test_list_is_scoped_and_newest_first(
        self, session: AsyncSession, user: CurrentUser
    ) -> None:
        service = NewsSetService(session)
        await service.create_set(user.id, NewsSetForm(name="First", subject="a"))
        await service.create_set(user.id, NewsSetForm(name="Second", subject="b"))
        await service.create_set(uuid4(), NewsSetForm(name="Other", subject="c"))
        sets = await service.list_sets(user.id)
        assert [s.name for s in sets] == ["Second", "First"]

    async def test_update_sets_updated_at(self, session: AsyncSession, user: CurrentUser) -> None:
        service = NewsSetService(session)
        [created] = await service.create_set(user.id, NewsSetForm(name="Tech", subject="AI"))
        assert created.updated_at is None
        [updated] = await service.update_set(
            user.id, created.id, NewsSetForm(name="Tech", subject="Robots", mood="positive")
        )
        assert updated.subject == "Robots"
        assert updated.mood == "positive"
        assert updated.updated_at is not None

    async def test_update_of_foreign_set(self, session: AsyncSession, user: CurrentUser) -> None:
        service = NewsSetService(session)
        [created] = await service.create_set(uuid4(), NewsSetForm(name="Theirs", subject="x"))
        with pytest.raises(NotFound):
            await service.update_set(user.id, created.id, NewsSetForm(name="Mine", subject="y"))

    async def test_delete_returns_remaining(self, session: AsyncSession, user: CurrentUser) -> None:
        service = NewsSetService(session)
        await service.create_set(user.id, NewsSetForm(name="Keep", subject="a"))
        sets = await service.create_set(user.id, NewsSetForm(name="Drop", subject="b"))
        drop = next(s for s in sets if s.name == "Drop")
        remaining = await service.delete_set(user.id, drop.id)
        assert [s.name for s in remaining] == ["Keep"]
        rows = (await session.execute(select(NewsSet))).scalars().all()
        assert len(rows) == 1

    async def test_delete_missing(self, session: AsyncSession, user: CurrentUser) -> None:
        with pytest.raises(NotFound):
            await NewsSetService(session).delete_set(user.id, uuid4())


class TestNewsSetsAPI:
    async def test_requires_session(
        self, client: httpx.AsyncClient, auth_provider: Callable
    ) -> None:
        auth_provider(lambda request: httpx.Response(401, json={"msg": "invalid JWT"}))
        resp = await client.get("/api/v1/news-sets")
        assert resp.status_code == 401
        assert resp.json()["login"] == "/login?next=%2Fapi%2Fv1%2Fnews-sets"

    async def test_crud(
        self, client: httpx.AsyncClient, sign_in: Callable, user: CurrentUser
    ) -> None:
        sign_in(user)
        resp = await client.post(
            "/api/v1/news-sets",
            json={"name": "Markets", "subject": "stocks", "num_articles": 3},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["total"] == 1
        set_id = body["sets"][0]["id"]

        resp = await client.put(
            f"/api/v1/news-sets/{set_id}",
            json={"name": "Markets", "subject": "bonds", "num_articles": 3},
        )
        assert resp.json()["sets"][0]["subject"] == "bonds"

        resp = await client.delete(f"/api/v1/news-sets/{set_id}")
        assert resp.status_code == 200
        assert resp.json() == {"sets": [], "total": 0}

    async def test_validation_message(
        self, client: httpx.AsyncClient, sign_in: Callable, user: CurrentUser
    ) -> None:
        sign_in(user)
        resp = await client.post("/api/v1/news-sets", json={"name": "x", "subject": ""})
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Subject is required"}
