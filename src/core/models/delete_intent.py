"""Deletion intents exchanged over the message bus.

Each intent serializes to a JSON envelope whose `action` doubles as the
queue name it is published to:

    {"action": "delete-single-faceclaim", "bucket": ..., "charid": ..., "key": ...}
    {"action": "delete-faceclaim-group", "bucket": ..., "charid": ...}
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from core.utils.constants import ACTION_DELETE_GROUP, ACTION_DELETE_SINGLE


class SingleDeleteIntent(BaseModel):
    """Request to delete one stored faceclaim."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: Literal["delete-single-faceclaim"] = ACTION_DELETE_SINGLE
    bucket: str = Field(..., min_length=1)
    charid: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1, description="Full object key, {charid}/{filename}")


class GroupDeleteIntent(BaseModel):
    """Request to delete every faceclaim stored under a character."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: Literal["delete-faceclaim-group"] = ACTION_DELETE_GROUP
    bucket: str = Field(..., min_length=1)
    charid: str = Field(..., min_length=1)


DeleteIntent = Annotated[
    SingleDeleteIntent | GroupDeleteIntent,
    Field(discriminator="action"),
]

_intent_adapter: TypeAdapter[SingleDeleteIntent | GroupDeleteIntent] = TypeAdapter(DeleteIntent)


def encode_intent(intent: SingleDeleteIntent | GroupDeleteIntent) -> str:
    return intent.model_dump_json()


def decode_intent(payload: str | bytes) -> SingleDeleteIntent | GroupDeleteIntent:
    """Parse a JSON envelope.

    Raises:
        pydantic.ValidationError: If the envelope does not match either variant
    """
    return _intent_adapter.validate_json(payload)
