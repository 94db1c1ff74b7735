"""
Lambda handler responsible for log file archival.
"""

from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.config import get_config
from core.models.errors import StorageError
from core.utils.auth import get_header, requires_auth
from core.utils.constants import LOG_FILE_FIELD
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import read_body

from .models import parse_multipart_file
from .service import LogUploadService

logger = Logger(UTC=True)
tracer = Tracer()

config = get_config()


@api_gateway_handler
@tracer.capture_lambda_handler
@requires_auth()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle multipart log uploads.

    The `log_file` form field is stored as-is in the log bucket. An existing
    log with the same filename is overwritten.

    Returns:
        201 on success, 400 if the file is missing, 500 if storage fails
    """
    logger.info(
        "Received log upload request",
        extra={
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    request = parse_multipart_file(
        read_body(event),
        get_header(event, "Content-Type"),
        LOG_FILE_FIELD,
    )

    try:
        filename = LogUploadService(config).upload(request)
    except StorageError as exc:
        logger.exception("Log upload failed", extra={"filename": request.filename})
        return ResponseBuilder.internal_error(
            exc.message,
            error=exc.error_code,
            request_id=getattr(context, "aws_request_id", None),
        )

    return ResponseBuilder.created(f"Uploaded {filename}")
