"""Router – health check."""

from fastapi import APIRouter

from src.image_mock.config import HEALTH_MESSAGE
from src.image_mock.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(message=HEALTH_MESSAGE)
