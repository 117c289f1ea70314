"""Router – mock image upload."""

from fastapi import APIRouter, Request

from src.image_mock.config import UPLOAD_ENDPOINT
from src.image_mock.schemas.upload import ApiResponse
from src.image_mock.services.upload_service import handle_upload

router = APIRouter(tags=["Upload"])


@router.post(
    UPLOAD_ENDPOINT,
    response_model=ApiResponse,
    response_model_exclude_none=True,
    response_model_by_alias=True,
)
async def upload_image(request: Request) -> ApiResponse:
    """
    Accept a ``multipart/form-data`` body with one file under ``image``.

    The body is parsed by hand rather than through ``File(...)`` so that a
    non-multipart request gets the structured "Invalid request format"
    answer instead of FastAPI's 422.

    Returns
    -------
    ApiResponse with ``success=True`` and ``data``:
        - filename  : original filename
        - size      : file size in bytes
        - type      : declared MIME type
        - timestamp : UTC ISO-8601 time of receipt

    Every rejection is raised as an ``ImageMockError`` and rendered by the
    handlers in ``src.image_mock.errors``.
    """
    return await handle_upload(request)
