"""Global exception handlers — map SDK exceptions to HTTP status codes.

The scorers raise ``InvalidInput`` for malformed input, and FastAPI raises
``RequestValidationError`` when a body does not match its model.  Both
become a 400 with a generic, client-safe message; the detail stays in the
server log.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from maternal_rulesets.errors import InvalidInput

logger = logging.getLogger(__name__)

# Shown to the user by the portal's error toast
INVALID_INPUT_MESSAGE = "We couldn't process your information"


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    """Map SDK ``InvalidInput`` to 400."""
    logger.warning("InvalidInput at %s: %s", request.url, exc)
    return JSONResponse(status_code=400, content={"detail": INVALID_INPUT_MESSAGE})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map malformed request bodies to 400 instead of FastAPI's default 422."""
    logger.warning("Request validation failed at %s: %s", request.url, exc.errors())
    return JSONResponse(status_code=400, content={"detail": INVALID_INPUT_MESSAGE})


async def key_error_handler(request: Request, exc: KeyError) -> JSONResponse:
    """Map ``KeyError`` (e.g. unknown scheme id) to 404."""
    logger.warning("KeyError at %s: %s", request.url, exc)
    return JSONResponse(status_code=404, content={"detail": "Resource not found"})


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — log full traceback, return 500."""
    logger.exception("Unhandled exception at %s", request.url)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )
