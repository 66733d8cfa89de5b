import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from resumatch.api.middleware import BodySizeLimitMiddleware
from resumatch.api.router import api_router
from resumatch.core.config import Settings, get_settings
from resumatch.core.llm import get_gemini_client
from resumatch.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    settings: Settings = app.state.settings
    logger.info("%s %s using model %s", settings.app_name, settings.app_version, settings.gemini_model)
    yield
    # Shutdown
    logger.info("%s shutting down", settings.app_name)


async def _http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


def _build_llm_client(settings: Settings):
    if not settings.llm_configured:
        logger.error("GEMINI_API_KEY is not set in environment variables")
        return None
    return get_gemini_client(settings)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.llm_client = _build_llm_client(settings)

    app.add_middleware(BodySizeLimitMiddleware, max_size_mb=settings.max_request_size_mb)
    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(api_router, prefix="/api")
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
