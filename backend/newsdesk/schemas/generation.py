"""Article generation trigger schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.constants.choices import ArticleLanguage, ArticleLength, ArticleStyle
from newsdesk.constants.settings_defaults import DEFAULT_ARTICLE_SETTINGS


class ArticleSettings(BaseModel):
    """Style options forwarded untouched to the workflow engine."""

    model_config = ConfigDict(populate_by_name=True)

    style: ArticleStyle = DEFAULT_ARTICLE_SETTINGS["style"]
    length: ArticleLength = DEFAULT_ARTICLE_SETTINGS["length"]
    custom_instructions: str = Field(
        default=DEFAULT_ARTICLE_SETTINGS["customInstructions"],
        alias="customInstructions",
        max_length=2000,
    )
    language: ArticleLanguage = DEFAULT_ARTICLE_SETTINGS["language"]


class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    article_id: UUID | None = Field(default=None, alias="articleId")
    settings: ArticleSettings = Field(default_factory=ArticleSettings)


class GenerationResponse(BaseModel):
    status: str
    message: str
