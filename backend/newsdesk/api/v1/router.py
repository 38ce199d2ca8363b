"""API v1 main router - aggregates all endpoint routers."""

from fastapi import APIRouter

from newsdesk.api.v1 import (
    account,
    admin_users,
    analytics,
    auth,
    contact,
    generation,
    library,
    news,
    news_sets,
    sequences,
    submissions,
)

api_router = APIRouter()

# News
api_router.include_router(news_sets.router, prefix="/news-sets", tags=["news-sets"])
api_router.include_router(library.router, prefix="/library", tags=["library"])
api_router.include_router(news.router, prefix="/news", tags=["news"])
api_router.include_router(sequences.router, prefix="/sequences", tags=["sequences"])
api_router.include_router(generation.router, prefix="/generation", tags=["generation"])

# Site forms
api_router.include_router(contact.router, prefix="/contact", tags=["contact"])
api_router.include_router(submissions.router)
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])

# Users
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(account.router, prefix="/account", tags=["account"])
api_router.include_router(admin_users.router, prefix="/admin/users", tags=["admin"])
