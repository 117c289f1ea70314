from pydantic import BaseModel, ConfigDict, Field


class UploadData(BaseModel):
    """Metadata echoed back for an accepted image."""
    filename: str
    size: int
    type: str
    timestamp: str


class ApiResponse(BaseModel):
    """Response schema for POST /api/image and every error body."""
    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    error: str | None = None
    received_type: str | None = Field(default=None, serialization_alias="receivedType")
    data: UploadData | None = None
