"""
Lambda handler responsible for faceclaim upload.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.config import get_config
from core.utils.auth import requires_auth
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, validate_request

from .models import FaceclaimUploadRequest
from .service import IngestionService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace="Faceclaims")

# Fails the cold start when required settings are missing
config = get_config()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
@requires_auth()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle faceclaim upload requests.

    The handler validates the JSON body, then downloads the image, converts
    it to WebP, and stores it. The response body is the public URL of the
    stored object.

    Expected API Gateway event structure:
    {
        "body": "{\"guild\": 1, \"user\": 2, \"charid\": \"...\", \"image_url\": \"...\"}",
        "headers": {"Authorization": "<token>"}
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        201 with the URL string, or 400 if validation or ingestion fails
    """
    logger.info(
        "Received faceclaim upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    request = validate_request(FaceclaimUploadRequest, parse_json_body(event))

    url = IngestionService(config).ingest(request)
    metrics.add_metric(name="FaceclaimUploaded", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.created(url)
