"""
FastAPI application factory.

* Registers the distance routes.
* Maps coordinate validation errors to plain-text 400 responses.
* Logs startup / shutdown via lifespan events.
* Serves only the two distance routes: no docs UI, no OpenAPI schema,
  no trailing-slash redirects.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from src.api.routes import haversine
from src.config import settings
from src.domain.errors import CoordinateError

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server running on http://localhost:%d", settings.port)
    yield
    logger.info("Server shutting down")


async def coordinate_error_handler(
    request: Request, exc: CoordinateError
) -> PlainTextResponse:
    logger.info("Rejected %s: %s", request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=400)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Haversine Distance API",
        description=(
            "Computes the great-circle distance in kilometres between two "
            "latitude / longitude pairs, plus a static HTML input form."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.add_exception_handler(CoordinateError, coordinate_error_handler)

    app.include_router(haversine.router)

    return app
