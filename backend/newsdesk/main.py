"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from newsdesk.api.v1.router import api_router
from newsdesk.config import get_settings
from newsdesk.errors import AuthRequired, NewsdeskError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    settings = get_settings()
    print(f"🚀 Starting {settings.app_name} in {settings.environment} mode")

    from newsdesk.db.postgres import init_db

    await init_db()
    print("📦 PostgreSQL tables initialized")

    yield

    # Shutdown
    print("👋 Shutting down...")


async def newsdesk_error_handler(request: Request, exc: NewsdeskError) -> JSONResponse:
    """Render domain errors as ``{"detail": message}`` with their status."""
    content: dict[str, str] = {"detail": exc.message}
    if isinstance(exc, AuthRequired) and exc.login_url:
        content["login"] = exc.login_url
    return JSONResponse(status_code=exc.status_code, content=content)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Customer dashboard API: news sets, library, sequences and site forms",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NewsdeskError, newsdesk_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
