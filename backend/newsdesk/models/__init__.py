"""Models package - SQLModel database models."""

from newsdesk.models.analytics import AnalyticsEvent
from newsdesk.models.news import NewsArticle, NewsSequence, NewsSet, WrittenArticle
from newsdesk.models.submissions import (
    ContactMessage,
    FeatureRequest,
    OfferClaim,
    WebsiteConfiguration,
)
from newsdesk.models.user import UserDetails, UserRole, UserSettings

__all__ = [
    "NewsSet",
    "NewsArticle",
    "WrittenArticle",
    "NewsSequence",
    "ContactMessage",
    "FeatureRequest",
    "OfferClaim",
    "WebsiteConfiguration",
    "AnalyticsEvent",
    "UserRole",
    "UserDetails",
    "UserSettings",
]
