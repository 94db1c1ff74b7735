"""Pydantic models for faceclaim delete path parameters."""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import PATH_SEGMENT_PATTERN


class DeleteFaceclaimGroupRequest(BaseModel):
    """Path parameters for `/faceclaim/delete/{bucket}/{charid}/all`."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    bucket: str = Field(..., min_length=1, description="Bucket holding the faceclaims")
    charid: str = Field(
        ...,
        min_length=1,
        pattern=PATH_SEGMENT_PATTERN,
        description="Character whose faceclaims are deleted",
    )


class DeleteFaceclaimRequest(DeleteFaceclaimGroupRequest):
    """Path parameters for `/faceclaim/delete/{bucket}/{charid}/{key}`."""

    key: str = Field(
        ...,
        min_length=1,
        pattern=PATH_SEGMENT_PATTERN,
        description="Object filename directly under the character",
    )
