"""Submission service - contact messages, feature requests, offer claims."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import NotFound, RemoteCallError, ValidationFailed
from newsdesk.models import ContactMessage, FeatureRequest, OfferClaim, WebsiteConfiguration
from newsdesk.schemas.submission import (
    AdminReply,
    ContactForm,
    FeatureRequestForm,
    FeatureRequestResponse,
    OfferClaimForm,
    WebsiteConfigurationForm,
)
from newsdesk.services.records import parse_record, parse_records
from newsdesk.services.webhooks import WebhookClient


def validate_feature_request(form: FeatureRequestForm) -> None:
    if not form.name.strip():
        raise ValidationFailed("Name is required")
    if not form.email.strip():
        raise ValidationFailed("Email is required")
    if not form.request_type:
        raise ValidationFailed("Request type is required")
    if not form.description.strip():
        raise ValidationFailed("Description is required")


def validate_offer_claim(form: OfferClaimForm) -> None:
    if not form.name.strip():
        raise ValidationFailed("Name is required")
    if not form.email.strip():
        raise ValidationFailed("Email is required")


class SubmissionService:
    """Writes public form submissions and serves the admin submissions page."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, row: object, failure: str) -> None:
        try:
            self.session.add(row)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error saving submission: {e}")
            raise RemoteCallError(failure) from e

    async def send_contact(self, form: ContactForm, webhooks: WebhookClient) -> ContactMessage:
        """Notify the contact webhook, then store the message. No rollback between the two."""
        await webhooks.notify_contact(form)
        message = ContactMessage(**form.model_dump())
        await self._save(message, "Failed to send message. Please try again.")
        return message

    async def create_feature_request(self, form: FeatureRequestForm) -> FeatureRequest:
        validate_feature_request(form)
        request = FeatureRequest(
            name=form.name,
            email=form.email,
            company=form.company or None,
            request_type=form.request_type,
            description=form.description,
        )
        await self._save(request, "Failed to submit your request. Please try again.")
        return request

    async def list_feature_requests(self) -> list[FeatureRequestResponse]:
        try:
            result = await self.session.execute(
                select(FeatureRequest).order_by(FeatureRequest.created_at.desc())
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching feature requests: {e}")
            raise RemoteCallError("Failed to load feature requests") from e
        return parse_records(FeatureRequestResponse, rows, "feature request")

    async def set_status(self, request_id: UUID, status: str) -> FeatureRequestResponse:
        request = await self._get_request(request_id)
        request.status = status
        await self._save(request, "Failed to update status")
        return parse_record(FeatureRequestResponse, request, "feature request")

    async def reply(self, request_id: UUID, reply: AdminReply) -> FeatureRequestResponse:
        """Store the admin's answer and mark the request responded."""
        request = await self._get_request(request_id)
        request.admin_response = reply.admin_response
        request.admin_notes = reply.admin_notes
        request.status = "responded"
        await self._save(request, "Failed to save response")
        return parse_record(FeatureRequestResponse, request, "feature request")

    async def create_offer_claim(self, form: OfferClaimForm, user_id: UUID | None) -> OfferClaim:
        validate_offer_claim(form)
        claim = OfferClaim(
            user_id=user_id,
            name=form.name,
            email=form.email,
            phone=form.phone or None,
            company=form.company or None,
            message=form.message or None,
        )
        await self._save(claim, "Failed to submit your offer claim. Please try again.")
        return claim

    async def create_website_configuration(
        self, form: WebsiteConfigurationForm, user_id: UUID | None
    ) -> WebsiteConfiguration:
        config = WebsiteConfiguration(
            user_id=user_id,
            selections=form.selections,
            custom_software=[s for s in form.custom_software if s.strip()],
            project_details=form.project_details,
            contact_info=form.contact_info,
            schedule_info=form.schedule_info,
        )
        await self._save(config, "Failed to submit configuration")
        return config

    async def _get_request(self, request_id: UUID) -> FeatureRequest:
        try:
            request = await self.session.get(FeatureRequest, request_id)
        except SQLAlchemyError as e:
            print(f"Error fetching feature request: {e}")
            raise RemoteCallError("Failed to load feature requests") from e
        if not request:
            raise NotFound(f"Feature request {request_id} not found")
        return request
