"""Article service - raw and written articles of the news library."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import NotFound, RemoteCallError, ValidationFailed
from newsdesk.models import NewsArticle, WrittenArticle
from newsdesk.schemas.article import (
    NewsArticleResponse,
    NewsArticleUpdate,
    WrittenArticleResponse,
)
from newsdesk.services.records import parse_record, parse_records

# NOT NULL columns of news_articles that an edit may not clear
REQUIRED_ARTICLE_FIELDS = ("subject", "mood", "introduction", "developments", "implications")


class ArticleService:
    """
    Reads both collections wholesale and writes edits and deletes straight
    to the store. No version check: the last writer wins.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_raw(self) -> list[NewsArticleResponse]:
        try:
            result = await self.session.execute(
                select(NewsArticle).order_by(NewsArticle.timestamp.desc())
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching articles: {e}")
            raise RemoteCallError("Failed to load articles") from e
        return parse_records(NewsArticleResponse, rows, "news article")

    async def list_written(self) -> list[WrittenArticleResponse]:
        try:
            result = await self.session.execute(
                select(WrittenArticle).order_by(WrittenArticle.timestamp.desc())
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching written articles: {e}")
            raise RemoteCallError("Failed to load written articles") from e
        return parse_records(WrittenArticleResponse, rows, "written article")

    async def latest_raw(self, limit: int = 4) -> list[NewsArticleResponse]:
        """Newest raw articles for the home page news section."""
        try:
            result = await self.session.execute(
                select(NewsArticle).order_by(NewsArticle.timestamp.desc()).limit(limit)
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching articles: {e}")
            raise RemoteCallError("Failed to fetch articles") from e
        return parse_records(NewsArticleResponse, rows, "news article")

    async def update_raw(self, article_id: UUID, changes: NewsArticleUpdate) -> NewsArticleResponse:
        """Write the edited fields and return the patched article."""
        fields = changes.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationFailed("No changes to save")
        cleared = [name for name in REQUIRED_ARTICLE_FIELDS if name in fields and fields[name] is None]
        if cleared:
            raise ValidationFailed(f"{cleared[0].capitalize()} cannot be empty")
        try:
            article = await self.session.get(NewsArticle, article_id)
            if not article:
                raise NotFound(f"Article {article_id} not found")
            for name, value in fields.items():
                setattr(article, name, value)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error updating article: {e}")
            raise RemoteCallError("Failed to update article") from e
        return parse_record(NewsArticleResponse, article, "news article")

    async def delete_raw(self, article_id: UUID) -> None:
        await self._delete_ids(NewsArticle, [article_id], single=True)

    async def delete_written(self, article_id: UUID) -> None:
        await self._delete_ids(WrittenArticle, [article_id], single=True)

    async def bulk_delete_raw(self, ids: list[UUID]) -> list[UUID]:
        return await self._delete_ids(NewsArticle, ids)

    async def bulk_delete_written(self, ids: list[UUID]) -> list[UUID]:
        return await self._delete_ids(WrittenArticle, ids)

    async def _delete_ids(
        self,
        model: type[NewsArticle] | type[WrittenArticle],
        ids: list[UUID],
        single: bool = False,
    ) -> list[UUID]:
        """One ``DELETE ... WHERE id IN (...)`` for the whole id set."""
        if not ids:
            return []
        try:
            result = await self.session.execute(delete(model).where(model.id.in_(ids)))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error deleting articles: {e}")
            message = "Failed to delete article" if single else "Failed to delete articles"
            raise RemoteCallError(message) from e
        if single and result.rowcount == 0:
            raise NotFound(f"Article {ids[0]} not found")
        return ids
