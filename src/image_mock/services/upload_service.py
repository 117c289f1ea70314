"""Service layer – multipart parsing and validation of the uploaded image.

Nothing here reads or stores the image bytes: the size Starlette tracked
while parsing is checked against the limit, the declared type against
the MIME allow-list, and the part is closed once the response is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

from src.image_mock.config import ALLOWED_MIME_TYPES, UPLOAD_SUCCESS_MESSAGE, settings
from src.image_mock.errors import (
    FileTooLargeError,
    InvalidMimeTypeError,
    MalformedRequestError,
    MissingFileError,
    UnexpectedFieldError,
)
from src.image_mock.schemas.upload import ApiResponse, UploadData

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"
# Boundaries, part headers and small text fields around the image part.
MULTIPART_OVERHEAD = 64 * 1024


@dataclass(frozen=True)
class UploadedFile:
    """What the client sent under the image field, for one request only."""

    original_name: str
    size_bytes: int
    declared_mime_type: str


# ──────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────
def is_multipart(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "multipart/form-data"


def is_allowed_mime_type(mime_type: str) -> bool:
    return mime_type in ALLOWED_MIME_TYPES


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2026-10-19T08:30:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def exceeds_declared_length(request: Request) -> bool:
    """True when ``Content-Length`` alone already rules the body out."""
    try:
        declared = int(request.headers.get("content-length", ""))
    except ValueError:
        return False
    return declared > settings.max_upload_size + MULTIPART_OVERHEAD


# ──────────────────────────────────────────────
# Parsing
# ──────────────────────────────────────────────
async def read_image_part(request: Request) -> UploadedFile:
    """
    Parse the multipart body and return the single file sent under the
    configured field name.

    A body that is not multipart at all carries no file part, so it is
    answered like a multipart body without the field.

    Raises
    ------
    MissingFileError      – not multipart, or no file part under the field.
    FileTooLargeError     – ``Content-Length`` or the part exceeds ``settings.max_upload_size``.
    MalformedRequestError – multipart body cannot be parsed.
    UnexpectedFieldError  – more than one file part under the field.
    """
    if not is_multipart(request):
        logger.warning("Rejected non-multipart upload (content-type=%r)",
                       request.headers.get("content-type"))
        raise MissingFileError()

    if exceeds_declared_length(request):
        logger.warning(
            "Rejected upload before parsing: content-length %s (limit %d)",
            request.headers.get("content-length"), settings.max_upload_size,
        )
        raise FileTooLargeError(settings.max_upload_size)

    field = settings.image_field_name
    try:
        async with request.form() as form:
            parts = [value for value in form.getlist(field) if isinstance(value, UploadFile)]

            if not parts:
                logger.warning("Rejected upload: no file under field %r", field)
                raise MissingFileError()
            if len(parts) > 1:
                logger.warning("Rejected upload: %d files under field %r", len(parts), field)
                raise UnexpectedFieldError()

            part = parts[0]
            file_size = part.size or 0
            if file_size > settings.max_upload_size:
                logger.warning(
                    "Rejected upload: %s is %d bytes (limit %d)",
                    part.filename, file_size, settings.max_upload_size,
                )
                raise FileTooLargeError(settings.max_upload_size)

            return UploadedFile(
                original_name=part.filename or "",
                size_bytes=file_size,
                declared_mime_type=part.content_type or DEFAULT_MIME_TYPE,
            )
    except (MultiPartException, StarletteHTTPException) as exc:
        logger.warning("Rejected unparsable multipart body: %s", exc)
        raise MalformedRequestError() from exc


# ──────────────────────────────────────────────
# Validation + response shaping
# ──────────────────────────────────────────────
def validate_uploaded_file(uploaded: UploadedFile) -> None:
    if not is_allowed_mime_type(uploaded.declared_mime_type):
        logger.warning(
            "Rejected upload: %s has unsupported type %s",
            uploaded.original_name, uploaded.declared_mime_type,
        )
        raise InvalidMimeTypeError(uploaded.declared_mime_type)


def build_success_response(uploaded: UploadedFile) -> ApiResponse:
    return ApiResponse(
        success=True,
        message=UPLOAD_SUCCESS_MESSAGE,
        data=UploadData(
            filename=uploaded.original_name,
            size=uploaded.size_bytes,
            type=uploaded.declared_mime_type,
            timestamp=utc_timestamp(),
        ),
    )


async def handle_upload(request: Request) -> ApiResponse:
    uploaded = await read_image_part(request)
    validate_uploaded_file(uploaded)
    logger.info(
        "📷 Image received: %s (%s, %d bytes)",
        uploaded.original_name, uploaded.declared_mime_type, uploaded.size_bytes,
    )
    return build_success_response(uploaded)
