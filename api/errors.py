# api/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core.errors import Conflict, InvalidInput, NotFound, StoreUnavailable

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map core errors onto HTTP responses with an ``{"error": ...}`` body."""

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        logger.warning("Invalid input on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        # An expected outcome for unknown IDs, not a server fault
        logger.info("Not found on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message})

    @app.exception_handler(Conflict)
    async def conflict_handler(request: Request, exc: Conflict):
        logger.warning("Conflict on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": exc.message})

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        logger.error("Store unavailable on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": exc.message},
        )
