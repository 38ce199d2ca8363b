"""Fixed choice sets shared by schemas and services."""

from typing import Literal, get_args

NewsType = Literal[
    "updates",
    "general news",
    "general business news",
    "financial - stocks news",
    "legal - law news",
    "geo politics news",
    "mainstream news",
    "independent news",
    "social media news",
]
Mood = Literal["positive", "neutral", "negative"]
Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

ArticleStyle = Literal["professional", "funny", "serious", "casual", "dramatic"]
ArticleLength = Literal["short", "medium", "long"]
ArticleLanguage = Literal["english", "dutch", "german", "french", "spanish", "russian"]

Role = Literal["admin", "website", "phone_agent", "social_media", "outreach", "user", "viewer"]
RequestType = Literal[
    "Feature Request",
    "Custom Solution",
    "Integration Question",
    "Pricing Inquiry",
    "Technical Question",
    "Other",
]
RequestStatus = Literal["pending", "in_progress", "responded", "completed", "rejected"]

# Index matches date.weekday()
WEEKDAYS: tuple[str, ...] = get_args(Weekday)
