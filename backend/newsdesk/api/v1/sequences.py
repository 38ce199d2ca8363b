"""Sequence (operating) API endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_current_user, get_today
from newsdesk.db.postgres import get_session as get_db
from newsdesk.errors import ValidationFailed
from newsdesk.schemas.sequence import (
    DayToggleRequest,
    DayToggleResponse,
    SequenceForm,
    SequenceListResponse,
    SequenceResponse,
    SequenceStats,
)
from newsdesk.services.auth_service import CurrentUser
from newsdesk.services.sequence_service import SequenceService

router = APIRouter()


def _listing(sequences: list[SequenceResponse]) -> SequenceListResponse:
    return SequenceListResponse(sequences=sequences, total=len(sequences))


@router.get("", response_model=SequenceListResponse)
async def list_sequences(
    user: CurrentUser = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> SequenceListResponse:
    """List sequences with their next-run hints."""
    return _listing(await SequenceService(db).list_sequences(user.id, today))


@router.get("/stats", response_model=SequenceStats)
async def sequence_stats(
    user: CurrentUser = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> SequenceStats:
    return await SequenceService(db).stats(user.id, today)


@router.post(
    "/toggle-day", response_model=DayToggleResponse, dependencies=[Depends(get_current_user)]
)
async def toggle_day(request: DayToggleRequest) -> DayToggleResponse:
    """Add or remove one day in an unsaved schedule."""
    try:
        return DayToggleResponse(schedule=request.schedule.toggle(request.day))
    except ValueError as e:
        raise ValidationFailed(str(e)) from e


@router.post("", response_model=SequenceListResponse, status_code=status.HTTP_201_CREATED)
async def create_sequence(
    form: SequenceForm,
    user: CurrentUser = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> SequenceListResponse:
    return _listing(await SequenceService(db).create_sequence(user.id, form, today))


@router.put("/{sequence_id}", response_model=SequenceListResponse)
async def update_sequence(
    sequence_id: UUID,
    form: SequenceForm,
    user: CurrentUser = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> SequenceListResponse:
    return _listing(
        await SequenceService(db).update_sequence(user.id, sequence_id, form, today)
    )


@router.post("/{sequence_id}/toggle-active", response_model=SequenceResponse)
async def toggle_sequence_active(
    sequence_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> SequenceResponse:
    """Flip ``is_active``. Nothing runs sequences, so this only changes the stored flag."""
    return await SequenceService(db).toggle_active(user.id, sequence_id, today)


@router.delete("/{sequence_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sequence(
    sequence_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> None:
    await SequenceService(db).delete_sequence(user.id, sequence_id)
