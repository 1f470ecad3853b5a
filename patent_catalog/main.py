"""FastAPI entrypoint for the patent dataset catalog."""

from __future__ import annotations

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patent_catalog.api.router import api_router
from patent_catalog.core.config import Settings, get_settings


def cors_origins(settings: Settings) -> List[str]:
    if settings.frontend_origin:
        return [str(settings.frontend_origin).rstrip("/")]
    return list(settings.allowed_hosts)


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title=settings.app_name, debug=settings.debug)

    origins = cors_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/health", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        """Simple health-check endpoint."""

        return {"status": "ok"}

    return app


app = create_app()
