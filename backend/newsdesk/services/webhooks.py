"""Webhook client for the external workflow engine."""

from typing import Any
from uuid import UUID

import httpx

from newsdesk.config import get_settings
from newsdesk.errors import RemoteCallError, ValidationFailed
from newsdesk.schemas.generation import ArticleSettings, GenerationResponse
from newsdesk.schemas.submission import ContactForm


class WebhookClient:
    """
    Fire-and-forget POSTs to the workflow engine.

    Only the HTTP status is looked at; response bodies are ignored and
    nothing is retried.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self.settings = get_settings()
        self.http_client = http_client or httpx.AsyncClient(
            timeout=self.settings.http_timeout_seconds,
        )

    @staticmethod
    def generation_payload(article_id: UUID, settings: ArticleSettings) -> dict[str, Any]:
        return {
            "articleId": str(article_id),
            "settings": settings.model_dump(by_alias=True),
        }

    async def trigger_generation(
        self, article_id: UUID | None, settings: ArticleSettings
    ) -> GenerationResponse:
        """Hand one raw article to the generation workflow."""
        if article_id is None:
            raise ValidationFailed("Please select an article first")

        payload = self.generation_payload(article_id, settings)
        try:
            resp = await self.http_client.post(self.settings.generation_webhook_url, json=payload)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            print(f"Error generating article: {e}")
            raise RemoteCallError("Failed to generate article. Please try again.") from e

        print(f"Generating article {article_id} with settings: {payload['settings']}")
        return GenerationResponse(
            status="started",
            message="Article generation started. Check the workflow engine for results.",
        )

    async def notify_contact(self, form: ContactForm) -> int:
        """Forward a contact form. Returns the webhook's status code."""
        payload = {"Action": "Contact", **form.model_dump()}
        try:
            resp = await self.http_client.post(self.settings.contact_webhook_url, json=payload)
        except httpx.HTTPError as e:
            print(f"Error sending message: {e}")
            raise RemoteCallError("Failed to send message. Please try again.") from e
        if resp.is_error:
            print(f"Contact webhook answered {resp.status_code}")
        return resp.status_code

    async def close(self) -> None:
        await self.http_client.aclose()
