# donation_api/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from donation_api.validation import InvalidDonation, format_errors

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves as `{"error": ...}`; internals never reach the client."""

    @app.exception_handler(InvalidDonation)
    async def _invalid_donation(request: Request, exc: InvalidDonation):
        return JSONResponse(status_code=400, content={"error": "Invalid input", "details": exc.details})

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        # e.g. a body that is not JSON at all
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid input", "details": format_errors(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _server_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Server error"})
