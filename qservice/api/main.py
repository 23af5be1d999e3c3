"""
post-service entry point: FastAPI app assembly, error handlers and router
wiring.
"""
import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from qservice import __version__
from qservice.config import get_config
from qservice.container import ServiceContainer, build_container
from qservice.domain.models import now_iso
from qservice.errors import BaseError, CommonSystemCode, CommonValidationCode, error_codes
from qservice.logging_setup import configure_logging
from .posts import router as posts_router

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: BaseError) -> JSONResponse:
    return JSONResponse({"success": False, **error.response}, status_code=status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ServiceContainer = app.state.container
    container.datasource.ping()
    logger.info("post_service_ready: env=%s", container.config.env)
    yield
    container.close()


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    app = FastAPI(
        title="Post Service",
        description="API for creating and reading blog-like posts.",
        version=__version__,
        lifespan=lifespan,
    )
    app.router.redirect_slashes = False
    app.state.container = container or build_container()

    @app.exception_handler(BaseError)
    async def typed_error_handler(request: Request, exc: BaseError):
        return _error_response(getattr(exc, "status_code", 500), exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = BaseError(
            error_codes.validation(CommonValidationCode.INVALID_VALUE),
            "Malformed request",
        )
        return _error_response(400, error)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error: method=%s path=%s", request.method, request.url.path)
        error = BaseError(error_codes.system(CommonSystemCode.UNEXPECTED), "Internal server error")
        return _error_response(500, error)

    @app.get("/health")
    def health():
        return {"status": "healthy", "timestamp": now_iso()}

    app.include_router(posts_router)
    return app


def main() -> None:
    try:
        config = get_config()
    except ValueError as exc:
        logger.error("config_invalid: %s", exc)
        sys.exit(1)

    configure_logging(config.logging)
    if config.env == "development":
        logger.info("effective_config: %s", json.dumps(config.redacted()))

    app = create_app(build_container(config))
    uvicorn.run(app, host=config.server.host, port=config.server.http_port, log_config=None)


if __name__ == "__main__":
    main()
