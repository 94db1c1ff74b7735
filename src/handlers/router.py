"""
Single entry point that routes API Gateway proxy events to handlers.

Used when one Lambda serves the whole API (`ANY /{proxy+}`); per-route
deployments can point at the individual handlers directly.
"""

from collections.abc import Callable
from typing import Any
from urllib.parse import unquote

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.auth import requires_auth
from core.utils.constants import ERROR_CODE_ROUTE_NOT_FOUND, GROUP_DELETE_SEGMENT
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from handlers.delete_faceclaim import handler as delete_faceclaim
from handlers.upload_faceclaim import handler as upload_faceclaim
from handlers.upload_log import handler as upload_log

logger = Logger(UTC=True)

JsonDict = dict[str, Any]
Route = tuple[Callable[..., JsonDict], dict[str, str]]


def resolve_route(method: str, path: str) -> Route | None:
    """Match a method and path to a handler and its path parameters."""
    segments = [unquote(s) for s in path.strip("/").split("/")]
    method = method.upper()

    if method == "POST" and segments == ["faceclaim", "upload"]:
        return upload_faceclaim.handler, {}

    if method == "POST" and segments == ["log", "upload"]:
        return upload_log.handler, {}

    if method == "DELETE" and len(segments) == 5 and segments[:2] == ["faceclaim", "delete"]:
        bucket, charid, last = segments[2:]
        if last == GROUP_DELETE_SEGMENT:
            return delete_faceclaim.group_handler, {"bucket": bucket, "charid": charid}
        return delete_faceclaim.handler, {"bucket": bucket, "charid": charid, "key": last}

    return None


@api_gateway_handler
@requires_auth()
def handler(event: JsonDict, context: LambdaContext) -> JsonDict:
    method = event.get("httpMethod") or ""
    path = event.get("path") or ""

    route = resolve_route(method, path)
    if route is None:
        logger.warning("No route matched", extra={"http_method": method, "path": path})
        return ResponseBuilder.not_found(
            f"No route for {method} {path}",
            error=ERROR_CODE_ROUTE_NOT_FOUND,
            request_id=getattr(context, "aws_request_id", None),
        )

    target, path_params = route
    logger.debug(
        "Routing request",
        extra={"handler": f"{target.__module__}.{target.__name__}", "path_params": path_params},
    )
    return target({**event, "pathParameters": path_params}, context)
