from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ideascout.api.routes.search import router as search_router
from ideascout.api.routes.system import router as system_router
from ideascout.core.config import get_settings
from ideascout.core.exceptions import APIError, ConfigurationError, ValidationError
from ideascout.core.logging import PACKAGE_LOGGER, get_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(_: FastAPI):
    settings = get_settings()
    missing: list[str] = []
    if not settings.GOOGLE_SEARCH_API_KEY:
        missing.append("GOOGLE_SEARCH_API_KEY")
    if not settings.GOOGLE_SEARCH_CX:
        missing.append("GOOGLE_SEARCH_CX")

    if missing:
        logger.warning("Missing environment variables at startup: %s", ", ".join(missing))

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = get_settings()
    get_logger(PACKAGE_LOGGER, settings.LOG_LEVEL)

    application = FastAPI(
        title="Idea Scout",
        version="1.0",
        lifespan=app_lifespan,
    )

    allowed_origins_set = {
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    }
    if settings.CORS_ORIGINS:
        allowed_origins_set.update(str(origin).rstrip("/") for origin in settings.CORS_ORIGINS)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins_set),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(search_router)
    application.include_router(system_router)

    @application.exception_handler(ConfigurationError)
    async def configuration_exception_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Configuration error at %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @application.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("Rejected request at %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @application.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid request body")
        logger.info("Rejected request body at %s: %s", request.url.path, errors)
        return JSONResponse(status_code=400, content={"error": f"{field}: {message}" if field else message})

    @application.exception_handler(APIError)
    async def api_exception_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.error("Search error at %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception at %s", request.url.path, exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @application.get("/")
    def read_root() -> dict[str, str]:
        return {"status": "System Operational", "message": "Idea Scout Backend is Running"}

    return application


app = create_app()
