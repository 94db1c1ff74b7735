"""Bearer-token gate for API Gateway handlers."""

from collections.abc import Callable
from functools import wraps
import hmac
from typing import Any

from aws_lambda_powertools import Logger

from core.config import ServiceConfig, get_config
from core.models.errors import AuthError
from core.utils.constants import AUTH_HEADER

logger = Logger(UTC=True)

JsonDict = dict[str, Any]


def get_header(event: JsonDict, name: str) -> str | None:
    """Case-insensitive header lookup on an API Gateway event."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for header, value in headers.items():
        if header.lower() == wanted:
            return str(value) if value is not None else None
    return None


def verify_auth(event: JsonDict, config: ServiceConfig) -> None:
    """Check the Authorization header against the configured token.

    Raises:
        AuthError: If the header is missing or does not match
    """
    token = get_header(event, AUTH_HEADER)
    if token is None or not hmac.compare_digest(
        token.encode("utf-8"), config.api_token.encode("utf-8")
    ):
        logger.warning(
            "Rejected request with invalid token",
            extra={"path": event.get("path"), "http_method": event.get("httpMethod")},
        )
        raise AuthError()


def requires_auth(
    config_provider: Callable[[], ServiceConfig] = get_config,
) -> Callable[[Callable[..., JsonDict]], Callable[..., JsonDict]]:
    """Decorator that runs `verify_auth` before the wrapped handler.

    Example:
        @api_gateway_handler
        @requires_auth()
        def handler(event, context):
            ...
    """

    def decorator(func: Callable[..., JsonDict]) -> Callable[..., JsonDict]:
        @wraps(func)
        def wrapper(event: JsonDict, context: Any) -> JsonDict:
            verify_auth(event, config_provider())
            return func(event, context)

        return wrapper

    return decorator
