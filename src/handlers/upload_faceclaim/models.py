"""Pydantic models for faceclaim upload request."""

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from core.utils.constants import PATH_SEGMENT_PATTERN


class FaceclaimUploadRequest(BaseModel):
    """Validation model for a faceclaim upload request."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    guild: StrictInt = Field(..., description="Owning guild id")
    user: StrictInt = Field(..., description="Owning user id")
    charid: str = Field(
        ...,
        min_length=1,
        pattern=PATH_SEGMENT_PATTERN,
        description="Character id; used as the storage key prefix",
    )
    image_url: str = Field(..., min_length=1, description="Source image URL")
    bucket: str | None = Field(None, description="Optional bucket override")

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("image_url must be an absolute http(s) URL")
        return value

    @field_validator("bucket", mode="before")
    @classmethod
    def blank_bucket_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def object_metadata(self) -> dict[str, str]:
        """Descriptive metadata attached to the stored object."""
        return {
            "guild": str(self.guild),
            "user": str(self.user),
            "original": self.image_url,
            "charid": self.charid,
        }
