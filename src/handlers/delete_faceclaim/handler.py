"""
Lambda handlers that queue faceclaim deletion.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.config import get_config
from core.utils.auth import requires_auth
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import DeleteFaceclaimGroupRequest, DeleteFaceclaimRequest
from .service import DeletionDispatcher

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace="Faceclaims")

config = get_config()


def _log_request(event: dict[str, Any], context: LambdaContext, message: str) -> None:
    logger.info(
        message,
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
@requires_auth()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle single faceclaim deletion requests.

    Publishes a delete-single-faceclaim intent. This is probably no faster
    for the caller than deleting inline, but it lets single and group
    deletions share one mechanism.

    Returns:
        200 once the intent is acknowledged, 500 if publishing fails
    """
    _log_request(event, context, "Received faceclaim delete request")

    request = validate_request(DeleteFaceclaimRequest, event.get("pathParameters") or {})

    DeletionDispatcher(config).dispatch_single(request.bucket, request.charid, request.key)
    metrics.add_metric(name="FaceclaimDeleteQueued", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.ok(f"Deleted {request.charid}/{request.key}")


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
@requires_auth()
def group_handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle deletion of every faceclaim belonging to a character.

    The objects are removed in the background so response time does not
    grow with the number of stored faceclaims.

    Returns:
        200 once the intent is acknowledged, 500 if publishing fails
    """
    _log_request(event, context, "Received faceclaim group delete request")

    request = validate_request(
        DeleteFaceclaimGroupRequest,
        event.get("pathParameters") or {},
    )

    DeletionDispatcher(config).dispatch_group(request.bucket, request.charid)
    metrics.add_metric(name="FaceclaimGroupDeleteQueued", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.ok(f"Deleted {request.charid}'s faceclaim images")
