"""Client error taxonomy and the JSON handlers that render it."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.image_mock.config import UPLOAD_ENDPOINT, settings
from src.image_mock.schemas.upload import ApiResponse

logger = logging.getLogger(__name__)


class ImageMockError(Exception):
    """Base class for every error surfaced to the client as an ``ApiResponse``."""

    status_code: int = 400
    error: str = "Bad request"

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_response(self) -> ApiResponse:
        return ApiResponse(success=False, error=self.error, message=self.message, **self.extra)


class MalformedRequestError(ImageMockError):
    error = "Invalid request format"

    def __init__(self) -> None:
        super().__init__(
            f'Please send image as multipart/form-data with field name "{settings.image_field_name}"'
        )


class MissingFileError(ImageMockError):
    error = "No image file provided"

    def __init__(self) -> None:
        super().__init__("Please upload an image file")


class UnexpectedFieldError(ImageMockError):
    error = "Unexpected field"

    def __init__(self) -> None:
        super().__init__(f'Only one file may be sent in field "{settings.image_field_name}"')


class FileTooLargeError(ImageMockError):
    status_code = 413
    error = "File too large"

    def __init__(self, limit: int) -> None:
        super().__init__(f"File exceeds the maximum size of {limit} bytes")


class InvalidMimeTypeError(ImageMockError):
    error = "Invalid file type"

    def __init__(self, mime_type: str) -> None:
        super().__init__(
            f"File type {mime_type} is not supported. Please upload an image.",
            received_type=mime_type,
        )


class RouteNotFoundError(ImageMockError):
    status_code = 404
    error = "Endpoint not found"

    def __init__(self) -> None:
        super().__init__(f"Use POST {UPLOAD_ENDPOINT} to upload images")


def _render(status_code: int, body: ApiResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def image_mock_error_handler(_request: Request, exc: ImageMockError) -> JSONResponse:
    return _render(exc.status_code, exc.to_response())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and unsupported methods both land on the catch-all 404."""
    if exc.status_code in (404, 405):
        logger.info("No route for %s %s", request.method, request.url.path)
        not_found = RouteNotFoundError()
        return _render(not_found.status_code, not_found.to_response())

    detail = str(exc.detail)
    return _render(exc.status_code, ApiResponse(success=False, error=detail, message=detail))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ImageMockError, image_mock_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
