"""
MTG Lore Lookup FastAPI Application Entry Point
FastAPI 应用入口
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mtg_lore import __version__
from mtg_lore.config import Settings, get_settings
from mtg_lore.exceptions import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_NAME_MESSAGE,
    LoreLookupError,
    ProviderError,
)
from mtg_lore.routers import health_router, lore_router
from mtg_lore.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Application startup (provider=%s, model=%s)", settings.llm_provider, settings.model)
    if not settings.api_key:
        logger.warning(
            "%s API key is missing; /api/lore will answer 500 until it is configured",
            settings.provider_label,
        )

    yield

    provider = app.state.llm_provider
    if provider is not None:
        await provider.aclose()
        app.state.llm_provider = None
    logger.info("Application shutdown")


async def lore_error_handler(request: Request, exc: LoreLookupError):
    """Map business errors to ``{"error": ...}`` without leaking internals."""
    if exc.status_code >= 500:
        extra = f" [{exc.reason}]" if isinstance(exc, ProviderError) else ""
        logger.error(
            "%s on %s %s%s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            extra,
            exc,
            exc_info=exc,
        )
    else:
        logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed lore request bodies are a bad character name, not a 422."""
    if request.url.path.rstrip("/") == "/api/lore":
        logger.warning("Rejected lore request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": INVALID_NAME_MESSAGE})
    return await request_validation_exception_handler(request, exc)


# Global exception handler: no internal details reach the client
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions and return a safe 500 response."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE_MESSAGE})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    创建 FastAPI 应用 / Create the FastAPI application.

    Args:
        settings: 应用配置，默认从环境读取 / Settings; read from the environment when omitted.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="MTG Lore Lookup API",
        description="Magic: The Gathering character lore lookup / 万智牌角色背景查询",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.llm_provider = None

    app.add_exception_handler(LoreLookupError, lore_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(lore_router, prefix="/api")
    app.include_router(health_router)
    return app


def run() -> None:
    """Console entry point: serve on HOST:PORT."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "mtg_lore.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
