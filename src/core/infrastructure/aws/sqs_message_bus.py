"""SQS-backed implementation of MessageBus."""

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from core.infrastructure.adapters.sqs_adapter import SQSAdapterProtocol
from core.models.errors import PublishError
from core.repositories.message_bus import MessageBus

logger = Logger(UTC=True)


class SQSMessageBus(MessageBus):
    """Publishes messages to the SQS queue named after the topic."""

    def __init__(self, adapter: SQSAdapterProtocol) -> None:
        self._sqs = adapter

    def publish(self, topic: str, payload: str) -> str:
        logger.debug("Publishing message", extra={"topic": topic, "payload": payload})

        try:
            message_id = self._sqs.send_message(queue_name=topic, body=payload)
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "Publish failed",
                extra={"topic": topic, "error": str(exc)},
            )
            raise PublishError(
                message=f"Publish.Get: {exc}",
                details={"topic": topic},
            ) from exc

        logger.info(
            "Message acknowledged",
            extra={"topic": topic, "message_id": message_id},
        )
        return message_id
