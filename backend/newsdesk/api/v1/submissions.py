"""Public submissions and their admin views."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import optional_user, require_admin
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.submission import (
    AdminReply,
    FeatureRequestForm,
    FeatureRequestListResponse,
    FeatureRequestResponse,
    OfferClaimForm,
    StatusUpdate,
    SubmissionReceipt,
    WebsiteConfigurationForm,
)
from newsdesk.services.auth_service import CurrentUser
from newsdesk.services.submission_service import SubmissionService

router = APIRouter()


# Feature requests


@router.post(
    "/feature-requests",
    response_model=SubmissionReceipt,
    status_code=status.HTTP_201_CREATED,
    tags=["feature-requests"],
)
async def create_feature_request(
    form: FeatureRequestForm, db: AsyncSession = Depends(get_db)
) -> SubmissionReceipt:
    request = await SubmissionService(db).create_feature_request(form)
    return SubmissionReceipt(
        id=request.id, message="Your request has been submitted successfully!"
    )


@router.get(
    "/feature-requests",
    response_model=FeatureRequestListResponse,
    dependencies=[Depends(require_admin)],
    tags=["feature-requests"],
)
async def list_feature_requests(db: AsyncSession = Depends(get_db)) -> FeatureRequestListResponse:
    """All feature requests, newest first."""
    requests = await SubmissionService(db).list_feature_requests()
    return FeatureRequestListResponse(requests=requests, total=len(requests))


@router.patch(
    "/feature-requests/{request_id}/status",
    response_model=FeatureRequestResponse,
    dependencies=[Depends(require_admin)],
    tags=["feature-requests"],
)
async def update_feature_request_status(
    request_id: UUID, update: StatusUpdate, db: AsyncSession = Depends(get_db)
) -> FeatureRequestResponse:
    return await SubmissionService(db).set_status(request_id, update.status)


@router.post(
    "/feature-requests/{request_id}/response",
    response_model=FeatureRequestResponse,
    dependencies=[Depends(require_admin)],
    tags=["feature-requests"],
)
async def respond_to_feature_request(
    request_id: UUID, reply: AdminReply, db: AsyncSession = Depends(get_db)
) -> FeatureRequestResponse:
    """Save the admin response; the request becomes ``responded``."""
    return await SubmissionService(db).reply(request_id, reply)


# Offer claims and website configurations


@router.post(
    "/offer-claims",
    response_model=SubmissionReceipt,
    status_code=status.HTTP_201_CREATED,
    tags=["offer-claims"],
)
async def claim_offer(
    form: OfferClaimForm,
    user: CurrentUser | None = Depends(optional_user),
    db: AsyncSession = Depends(get_db),
) -> SubmissionReceipt:
    claim = await SubmissionService(db).create_offer_claim(form, user.id if user else None)
    return SubmissionReceipt(id=claim.id, message="Your offer claim has been submitted!")


@router.post(
    "/website-configurations",
    response_model=SubmissionReceipt,
    status_code=status.HTTP_201_CREATED,
    tags=["website-configurations"],
)
async def submit_website_configuration(
    form: WebsiteConfigurationForm,
    user: CurrentUser | None = Depends(optional_user),
    db: AsyncSession = Depends(get_db),
) -> SubmissionReceipt:
    config = await SubmissionService(db).create_website_configuration(
        form, user.id if user else None
    )
    return SubmissionReceipt(id=config.id, message="Configuration submitted")
