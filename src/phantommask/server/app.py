"""Starlette ASGI application for the PhantomMask HTTP API.

All cryptography runs server-side through :mod:`phantommask.identity`;
derived private keys are never included in a response.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from phantommask.core.logging import configure_logging
from phantommask.identity import PROTOCOL_VERSION

from .config import get_settings
from .endpoints import derive_endpoint, sign_endpoint, verify_endpoint

logger = logging.getLogger(__name__)

# API version prefix for all REST endpoints
API_V1 = "/api/v1"


async def health_endpoint(request: Request) -> JSONResponse:
    """Health check endpoint."""
    settings = get_settings()
    return JSONResponse(
        {
            "status": "healthy",
            "server": settings.server_name,
            "version": settings.server_version,
        }
    )


async def info_endpoint(request: Request) -> JSONResponse:
    """Server info endpoint."""
    settings = get_settings()

    response_data: dict[str, Any] = {
        "server": settings.server_name,
        "version": settings.server_version,
        "apiVersion": "v1",
        "protocol": PROTOCOL_VERSION,
        "endpoints": {
            "info": "/",
            "health": f"{API_V1}/health",
            "derive": f"{API_V1}/derive",
            "sign": f"{API_V1}/sign",
            "verify": f"{API_V1}/verify",
        },
    }
    return JSONResponse(response_data)


@asynccontextmanager
async def lifespan(app: Starlette):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info("Starting PhantomMask API on %s:%d", settings.host, settings.port)
    yield
    logger.info("PhantomMask API shutting down")


def create_app() -> Starlette:
    """Create the Starlette ASGI application."""
    settings = get_settings()

    routes = [
        Route("/", info_endpoint, methods=["GET"]),
        Route(f"{API_V1}/health", health_endpoint, methods=["GET"]),
        Route(f"{API_V1}/derive", derive_endpoint, methods=["POST"]),
        Route(f"{API_V1}/sign", sign_endpoint, methods=["POST"]),
        Route(f"{API_V1}/verify", verify_endpoint, methods=["POST"]),
    ]

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type"],
        ),
    ]

    return Starlette(
        routes=routes,
        middleware=middleware,
        lifespan=lifespan,
    )


def run() -> None:
    """Run the server using uvicorn."""
    import uvicorn

    configure_logging()
    settings = get_settings()

    uvicorn.run(
        "phantommask.server.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
