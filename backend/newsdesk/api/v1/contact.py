"""Contact form API endpoint."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_webhook_client
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.submission import ContactForm, SubmissionReceipt
from newsdesk.services.submission_service import SubmissionService
from newsdesk.services.webhooks import WebhookClient

router = APIRouter()


@router.post("", response_model=SubmissionReceipt, status_code=status.HTTP_201_CREATED)
async def send_contact_message(
    form: ContactForm,
    webhooks: WebhookClient = Depends(get_webhook_client),
    db: AsyncSession = Depends(get_db),
) -> SubmissionReceipt:
    message = await SubmissionService(db).send_contact(form, webhooks)
    return SubmissionReceipt(
        id=message.id, message="Thank you for your message. We will get back to you soon."
    )
