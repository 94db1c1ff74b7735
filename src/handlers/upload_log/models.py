"""Models and multipart parsing for log uploads."""

from email import policy
from email.message import EmailMessage
from email.parser import BytesParser

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.models.errors import ValidationError


class LogUploadRequest(BaseModel):
    """A single uploaded log file."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1, description="Object name in the log bucket")
    content: bytes = Field(..., description="Raw file content")

    @field_validator("filename")
    @classmethod
    def strip_directories(cls, value: str) -> str:
        name = value.replace("\\", "/").rsplit("/", 1)[-1].strip()
        if not name:
            raise ValueError("Invalid log filename")
        return name


def parse_multipart_file(body: bytes, content_type: str | None, field: str) -> LogUploadRequest:
    """Extract the file posted under form field `field`.

    Raises:
        ValidationError: If the body is not multipart or the field is absent
    """
    if not content_type or not content_type.lower().startswith("multipart/form-data"):
        raise ValidationError(message="Invalid request: expected multipart/form-data")
    if not body:
        raise ValidationError(message="Invalid request: body is empty")

    header = f"Content-Type: {content_type}\r\n\r\n".encode("latin-1")
    message = BytesParser(policy=policy.HTTP).parsebytes(header + body)
    if not isinstance(message, EmailMessage) or not message.is_multipart():
        raise ValidationError(message="Invalid multipart body")

    for part in message.iter_parts():
        if part.get_param("name", header="content-disposition") != field:
            continue

        filename = part.get_filename()
        if not filename:
            raise ValidationError(message=f"Missing filename for form field {field}")

        payload = part.get_payload(decode=True)
        content = payload if isinstance(payload, bytes) else b""

        try:
            return LogUploadRequest(filename=filename, content=content)
        except ValueError as exc:
            raise ValidationError(message=f"Invalid log file: {exc}") from exc

    raise ValidationError(message=f"Missing form file field {field}")
