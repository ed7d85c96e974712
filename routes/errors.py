"""Centralized error handling utilities"""

import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorMessage:
    """Error message constants"""
    MISSING_URL = "Missing url querystring."
    INVALID_URL = "Invalid URL."
    INVALID_YOUTUBE_URL = "Invalid Youtube URL."
    NOT_FOUND = "Related videos not found."


def create_http_error(status_code: int, detail: str) -> HTTPException:
    """Create HTTPException with logging"""
    emoji = "❌"
    if status_code == 400:
        emoji = "⚠️"
    elif status_code == 404:
        emoji = "🔍"
    elif status_code == 500:
        emoji = "💥"

    logger.warning(f"{emoji} {status_code}: {detail}")
    return HTTPException(status_code=status_code, detail=detail)


def handle_exception(e: Exception, context: str = "Scraping") -> HTTPException:
    """Convert an upstream failure to a 500 carrying the error text"""
    logger.exception(f"💥 {context} failed: {e}")
    return HTTPException(status_code=500, detail=str(e) or type(e).__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": detail}``"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))
