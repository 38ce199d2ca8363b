"""Tests for contact messages, feature requests and other site forms."""

import json
from collections.abc import Callable

import httpx
import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsdesk.errors import ValidationFailed
from newsdesk.models import ContactMessage, OfferClaim, WebsiteConfiguration
from newsdesk.schemas.submission import AdminReply, FeatureRequestForm
from newsdesk.services.auth_service import CurrentUser
from newsdesk.services.submission_service import SubmissionService
from conftest import RecordingTransport


class TestFeatureRequests:
    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"email": "a@b.c", "request_type": "Other", "description": "d"}, "Name is required"),
            ({"name": "A", "request_type": "Other", "description": "d"}, "Email is required"),
            ({"name": "A", "email": "a@b.c", "description": "d"}, "Request type is required"),
            ({"name": "A", "email": "a@b.c", "request_type": "Other"}, "Description is required"),
        ],
    )
    async def test_validation(self, session: AsyncSession, fields: dict, message: str) -> None:
        with pytest.raises(ValidationFailed) as exc_info:
            await SubmissionService(session).create_feature_request(FeatureRequestForm(**fields))
        assert exc_info.value.message == message

    async def test_reply_marks_responded(self, session: AsyncSession) -> None:
        service = SubmissionService(session)
        request = await service.create_feature_request(
            FeatureRequestForm(
                name="A", email="a@b.c", request_type="Pricing Inquiry", description="How much?"
            )
        )
        assert request.status == "pending"

        answered = await service.reply(request.id, AdminReply(admin_response="Let's talk"))
        assert answered.status == "responded"
        assert answered.admin_response == "Let's talk"

        closed = await service.set_status(request.id, "completed")
        assert closed.status == "completed"

    async def test_admin_listing(
        self, client: httpx.AsyncClient, sign_in: Callable, admin: CurrentUser
    ) -> None:
        for name in ("first", "second"):
            resp = await client.post(
                "/api/v1/feature-requests",
                json={
                    "name": name,
                    "email": "a@b.c",
                    "request_type": "Other",
                    "description": "d",
                },
            )
            assert resp.status_code == 201

        sign_in(admin)
        resp = await client.get("/api/v1/feature-requests")
        assert [r["name"] for r in resp.json()["requests"]] == ["second", "first"]

        request_id = resp.json()["requests"][0]["id"]
        resp = await client.patch(
            f"/api/v1/feature-requests/{request_id}/status", json={"status": "bogus"}
        )
        assert resp.status_code == 422


class TestContact:
    async def test_webhook_then_insert(
        self,
        client: httpx.AsyncClient,
        webhook_transport: RecordingTransport,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        resp = await client.post(
            "/api/v1/contact",
            json={"name": "Ann", "email": "ann@example.com", "message": "Hello"},
        )
        assert resp.status_code == 201
        [request] = webhook_transport.requests
        assert json.loads(request.content)["Action"] == "Contact"
        async with session_factory() as session:
            rows = (await session.execute(select(ContactMessage))).scalars().all()
        assert [r.name for r in rows] == ["Ann"]

    async def test_invalid_email(self, client: httpx.AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/contact", json={"name": "Ann", "email": "nope", "message": "Hello"}
        )
        assert resp.status_code == 422


class TestOtherForms:
    async def test_offer_claim_attaches_user(
        self,
        client: httpx.AsyncClient,
        sign_in: Callable,
        user: CurrentUser,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        sign_in(user)
        resp = await client.post(
            "/api/v1/offer-claims", json={"name": "Ann", "email": "ann@example.com"}
        )
        assert resp.status_code == 201
        async with session_factory() as session:
            claim = (await session.execute(select(OfferClaim))).scalar_one()
        assert claim.user_id == user.id

    async def test_offer_claim_requires_email(self, client: httpx.AsyncClient) -> None:
        resp = await client.post("/api/v1/offer-claims", json={"name": "Ann"})
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Email is required"}

    async def test_website_configuration(
        self,
        client: httpx.AsyncClient,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        resp = await client.post(
            "/api/v1/website-configurations",
            json={
                "selections": {"pages": 5},
                "custom_software": ["CRM", "  "],
                "contact_info": {"email": "ann@example.com"},
            },
        )
        assert resp.status_code == 201
        async with session_factory() as session:
            config = (await session.execute(select(WebsiteConfiguration))).scalar_one()
        assert str(config.id) == resp.json()["id"]
        assert config.custom_software == ["CRM"]
        assert config.status == "pending"
