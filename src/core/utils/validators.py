"""Request validation utilities."""

import base64
import json
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "valid integer" in msg_lower:
            msg = "Must be an integer"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def read_body(event: dict[str, Any]) -> bytes:
    """Return the raw request body, decoding base64 when API Gateway encoded it."""
    body = event.get("body")
    if body is None:
        return b""

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except ValueError as exc:
            raise ValidationError(message="Invalid base64 request body") from exc

    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def parse_json_body(event: dict[str, Any]) -> dict[str, Any]:
    """Parse a JSON object from an API Gateway event body.

    Raises:
        ValidationError: If the body is empty, not JSON, or not an object
    """
    raw = read_body(event)
    if not raw.strip():
        raise ValidationError(message="Invalid request: body is empty")

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(message=f"Invalid JSON body: {exc}") from exc

    if not isinstance(data, dict):
        raise ValidationError(message="Invalid request: body must be a JSON object")

    return data


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate

    Returns:
        The validated model instance

    Raises:
        ValidationError: With sanitized field errors in `details`
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        sanitized = sanitize_validation_errors(list(exc.errors()))
        summary = "; ".join(f"{err['field']}: {err['message']}" for err in sanitized)
        raise ValidationError(
            message=f"Invalid request payload: {summary}",
            details={"errors": sanitized},
        ) from exc
