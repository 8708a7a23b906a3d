"""
FastAPI application factory.

Run with any ASGI server using the factory, e.g.
`uvicorn adapters.api.app:create_app --factory`.
"""

from collections import defaultdict

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adapters.api import routes
from core.config import AppConfig, get_config
from core.log_config import configure_logging
from core.services.client_service import ClientService
from core.services.health_assessment import HealthAssessmentService
from core.services.repository import ClientRepository, InMemoryClientRepository

logger = structlog.get_logger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed payloads with 400 and a field -> messages map."""
    errors: dict[str, list[str]] = defaultdict(list)
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors[".".join(loc) or "request"].append(error.get("msg", "Invalid value"))

    logger.info("request_rejected", path=request.url.path, fields=sorted(errors))
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": dict(errors)},
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.info("invalid_argument", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"message": str(exc)})


def create_app(
    config: AppConfig | None = None,
    repository: ClientRepository | None = None,
) -> FastAPI:
    """Build the API with its services wired in."""
    config = config or get_config()
    configure_logging(config.logging)

    app = FastAPI(
        title=config.api.title,
        version=config.api.version,
        description="Client health assessments with rule-based health reports",
        debug=config.debug,
    )
    app.state.config = config
    app.state.client_service = ClientService(
        repository or InMemoryClientRepository(), HealthAssessmentService()
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValueError, value_error_handler)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": config.api.version}

    app.include_router(routes.router)

    logger.info("app_created", environment=config.environment, title=config.api.title)
    return app
