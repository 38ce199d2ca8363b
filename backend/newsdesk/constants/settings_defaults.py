"""Default form values shared across the application."""

from typing import Any

# Defaults for the news set form
DEFAULT_NEWS_SET: dict[str, Any] = {
    "num_articles": 5,
    "news_type": "general news",
    "mood": "neutral",
}

# Defaults for the article generation workspace
DEFAULT_ARTICLE_SETTINGS: dict[str, Any] = {
    "style": "professional",
    "length": "medium",
    "customInstructions": "",
    "language": "english",
}

# Defaults for new users
DEFAULT_USER_SETTINGS: dict[str, Any] = {
    "language_preference": "en",
    "theme": "dark",
    "notifications": {"email": True, "push": True, "marketing": False},
}

ANALYTICS_RANGES_DAYS: tuple[int, ...] = (7, 14, 30, 90)
