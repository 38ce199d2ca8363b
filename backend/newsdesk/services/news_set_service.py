"""News set service - gathering configuration per user."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import NotFound, RemoteCallError, ValidationFailed
from newsdesk.models import NewsSet
from newsdesk.schemas.news_set import NewsSetForm, NewsSetResponse
from newsdesk.services.records import parse_records


def validate_news_set(form: NewsSetForm) -> None:
    """Required-field checks, run before any store call."""
    if not form.name.strip():
        raise ValidationFailed("Name is required")
    if not form.subject.strip():
        raise ValidationFailed("Subject is required")
    if form.num_articles < 1:
        raise ValidationFailed("Number of articles must be at least 1")


class NewsSetService:
    """Service for managing a user's news sets."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_sets(self, user_id: UUID) -> list[NewsSetResponse]:
        """All sets of the user, newest first."""
        try:
            result = await self.session.execute(
                select(NewsSet)
                .where(NewsSet.user_id == user_id)
                .order_by(NewsSet.created_at.desc())
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching news sets: {e}")
            raise RemoteCallError("Failed to load news sets") from e
        return parse_records(NewsSetResponse, rows, "news set")

    async def create_set(self, user_id: UUID, form: NewsSetForm) -> list[NewsSetResponse]:
        """Create a set and return the refreshed list."""
        validate_news_set(form)
        news_set = NewsSet(
            user_id=user_id,
            name=form.name,
            subject=form.subject,
            num_articles=form.num_articles,
            news_type=form.news_type,
            mood=form.mood,
        )
        try:
            self.session.add(news_set)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error saving news set: {e}")
            raise RemoteCallError("Failed to save news set") from e
        return await self.list_sets(user_id)

    async def update_set(
        self, user_id: UUID, set_id: UUID, form: NewsSetForm
    ) -> list[NewsSetResponse]:
        """Overwrite a set's fields and return the refreshed list."""
        validate_news_set(form)
        try:
            news_set = await self._get_owned(user_id, set_id)
            news_set.name = form.name
            news_set.subject = form.subject
            news_set.num_articles = form.num_articles
            news_set.news_type = form.news_type
            news_set.mood = form.mood
            news_set.updated_at = datetime.now(UTC)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error saving news set: {e}")
            raise RemoteCallError("Failed to save news set") from e
        return await self.list_sets(user_id)

    async def delete_set(self, user_id: UUID, set_id: UUID) -> list[NewsSetResponse]:
        """
        Delete a set right away and return the remaining sets.
        Sequences that reference it keep the stale id.
        """
        try:
            result = await self.session.execute(
                delete(NewsSet).where(NewsSet.id == set_id, NewsSet.user_id == user_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error deleting news set: {e}")
            raise RemoteCallError("Failed to delete news set") from e
        if result.rowcount == 0:
            raise NotFound(f"News set {set_id} not found")
        return await self.list_sets(user_id)

    async def _get_owned(self, user_id: UUID, set_id: UUID) -> NewsSet:
        result = await self.session.execute(
            select(NewsSet).where(NewsSet.id == set_id, NewsSet.user_id == user_id)
        )
        news_set = result.scalar_one_or_none()
        if not news_set:
            raise NotFound(f"News set {set_id} not found")
        return news_set
