"""
SQS-triggered Lambda that performs queued faceclaim deletions.

Subscribed to both the delete-single-faceclaim and delete-faceclaim-group
queues. Failed records are reported back individually so SQS only
re-delivers those.
"""

from functools import partial
from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.batch import (
    BatchProcessor,
    EventType,
    process_partial_response,
)
from aws_lambda_powertools.utilities.data_classes.sqs_event import SQSRecord
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.config import get_config
from core.infrastructure.adapters.s3_adapter import S3Adapter
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.models.delete_intent import decode_intent

from .service import DeletionConsumer

logger = Logger(UTC=True)
tracer = Tracer()
processor = BatchProcessor(event_type=EventType.SQS)

config = get_config()


def record_handler(record: SQSRecord, consumer: DeletionConsumer) -> int:
    try:
        intent = decode_intent(record.body)
    except ValueError:
        logger.exception(
            "Malformed delete intent",
            extra={"message_id": record.message_id, "body": record.body},
        )
        raise

    return consumer.apply(intent)


@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    logger.info(
        "Received deletion batch",
        extra={"records": len(event.get("Records") or [])},
    )
    # One S3 client serves every record in the batch
    consumer = DeletionConsumer(S3ObjectStorage(S3Adapter(config)))
    return process_partial_response(
        event=event,
        record_handler=partial(record_handler, consumer=consumer),
        processor=processor,
        context=context,
    )
