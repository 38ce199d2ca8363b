"""Sequence service - schedule-shaped groupings of news sets."""

from datetime import UTC, date, datetime
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import MalformedRecord, NotFound, RemoteCallError, ValidationFailed
from newsdesk.models import NewsSequence, NewsSet
from newsdesk.schemas.sequence import (
    SequenceForm,
    SequenceResponse,
    SequenceStats,
    schedule_adapter,
)
from newsdesk.services.schedule import describe_upcoming, next_run


def validate_sequence(form: SequenceForm) -> None:
    """Required-field checks, run before any store call."""
    if not form.name.strip():
        raise ValidationFailed("Please enter a sequence name")
    if not form.schedule.days:
        raise ValidationFailed("Please select at least one day")
    if not form.sets:
        raise ValidationFailed("Please select at least one news set")


def to_response(row: NewsSequence, today: date) -> SequenceResponse:
    """Build the tagged schedule from the stored frequency and days."""
    try:
        schedule = schedule_adapter.validate_python(
            {"frequency": row.frequency, "days": row.days}
        )
        sequence = SequenceResponse(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            schedule=schedule,
            sets=row.sets,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
    except ValidationError as e:
        print(f"Malformed sequence record {row.id}: {e}")
        raise MalformedRecord("Malformed sequence record") from e
    sequence.next_run = next_run(schedule, today)
    sequence.upcoming = describe_upcoming(schedule, today, row.is_active)
    return sequence


class SequenceService:
    """
    CRUD over ``news_sequences``.

    ``is_active`` is stored and returned; nothing in this service acts on it.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_sequences(self, user_id: UUID, today: date) -> list[SequenceResponse]:
        """All sequences of the user, newest first."""
        try:
            result = await self.session.execute(
                select(NewsSequence)
                .where(NewsSequence.user_id == user_id)
                .order_by(NewsSequence.created_at.desc())
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching sequences: {e}")
            raise RemoteCallError("Failed to load sequences") from e
        return [to_response(row, today) for row in rows]

    async def create_sequence(
        self, user_id: UUID, form: SequenceForm, today: date
    ) -> list[SequenceResponse]:
        validate_sequence(form)
        sequence = NewsSequence(
            user_id=user_id,
            name=form.name,
            frequency=form.schedule.frequency,
            days=list(form.schedule.days),
            sets=[str(set_id) for set_id in form.sets],
            is_active=form.is_active,
        )
        try:
            self.session.add(sequence)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error saving sequence: {e}")
            raise RemoteCallError("Failed to save sequence") from e
        return await self.list_sequences(user_id, today)

    async def update_sequence(
        self, user_id: UUID, sequence_id: UUID, form: SequenceForm, today: date
    ) -> list[SequenceResponse]:
        validate_sequence(form)
        try:
            sequence = await self._get_owned(user_id, sequence_id)
            sequence.name = form.name
            sequence.frequency = form.schedule.frequency
            sequence.days = list(form.schedule.days)
            sequence.sets = [str(set_id) for set_id in form.sets]
            sequence.is_active = form.is_active
            sequence.updated_at = datetime.now(UTC)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error saving sequence: {e}")
            raise RemoteCallError("Failed to save sequence") from e
        return await self.list_sequences(user_id, today)

    async def toggle_active(
        self, user_id: UUID, sequence_id: UUID, today: date
    ) -> SequenceResponse:
        """Flip the active flag and return the patched sequence."""
        try:
            sequence = await self._get_owned(user_id, sequence_id)
            sequence.is_active = not sequence.is_active
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error toggling sequence status: {e}")
            raise RemoteCallError("Failed to update sequence") from e
        return to_response(sequence, today)

    async def delete_sequence(self, user_id: UUID, sequence_id: UUID) -> None:
        try:
            result = await self.session.execute(
                delete(NewsSequence).where(
                    NewsSequence.id == sequence_id, NewsSequence.user_id == user_id
                )
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error deleting sequence: {e}")
            raise RemoteCallError("Failed to delete sequence") from e
        if result.rowcount == 0:
            raise NotFound(f"Sequence {sequence_id} not found")

    async def stats(self, user_id: UUID, today: date) -> SequenceStats:
        """Counts for the operating tab header. Upcoming is the active count."""
        sequences = await self.list_sequences(user_id, today)
        try:
            result = await self.session.execute(
                select(NewsSet.id).where(NewsSet.user_id == user_id)
            )
            total_sets = len(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching news sets: {e}")
            raise RemoteCallError("Failed to load news sets") from e
        active = sum(1 for s in sequences if s.is_active)
        return SequenceStats(
            total_sets=total_sets,
            total_sequences=len(sequences),
            active_sequences=active,
            upcoming_sequences=active,
        )

    async def _get_owned(self, user_id: UUID, sequence_id: UUID) -> NewsSequence:
        result = await self.session.execute(
            select(NewsSequence).where(
                NewsSequence.id == sequence_id, NewsSequence.user_id == user_id
            )
        )
        sequence = result.scalar_one_or_none()
        if not sequence:
            raise NotFound(f"Sequence {sequence_id} not found")
        return sequence
