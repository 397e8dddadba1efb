"""
Error responses.

Every JSON error body is `{"error": "<message>"}`. Unmatched routes get the
rendered 404 page instead of JSON.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import views

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, *, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


def bad_request(message: str) -> ApiError:
    return ApiError(message, status_code=status.HTTP_400_BAD_REQUEST)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def requested_page(request: Request) -> str:
    url = request.url
    return f"{url.path}?{url.query}" if url.query else url.path


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.info("page_not_found path=%s", request.url.path)
        return views.render(
            request,
            "notFound.html",
            {"page": requested_page(request)},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def install(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
