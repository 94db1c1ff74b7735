"""Business logic for faceclaim deletion.

Deletion is deferred: this service only publishes an intent and returns
once the broker has accepted it. The deletion consumer removes the objects
later, so a group delete costs the same regardless of how many objects the
character owns.
"""

from aws_lambda_powertools import Logger

from core.config import ServiceConfig
from core.infrastructure.adapters.sqs_adapter import SQSAdapter
from core.infrastructure.aws.sqs_message_bus import SQSMessageBus
from core.models.delete_intent import (
    GroupDeleteIntent,
    SingleDeleteIntent,
    encode_intent,
)
from core.repositories.message_bus import MessageBus

logger = Logger(UTC=True)


class DeletionDispatcher:
    """Builds delete intents and publishes them to their queues.

    Delivery is at-least-once and intents for the same character are not
    ordered relative to each other.
    """

    def __init__(self, config: ServiceConfig, *, bus: MessageBus | None = None) -> None:
        self.bus = bus or SQSMessageBus(SQSAdapter(config))

    def dispatch_single(self, bucket: str, charid: str, key: str) -> str:
        """Queue deletion of `{charid}/{key}` in `bucket`.

        Returns:
            Broker message id

        Raises:
            PublishError: If the intent could not be published
        """
        intent = SingleDeleteIntent(bucket=bucket, charid=charid, key=f"{charid}/{key}")
        message_id = self.bus.publish(intent.action, encode_intent(intent))

        logger.info(
            "Queued deletion of object",
            extra={"bucket": bucket, "key": intent.key, "message_id": message_id},
        )
        return message_id

    def dispatch_group(self, bucket: str, charid: str) -> str:
        """Queue deletion of every object under `{charid}/` in `bucket`.

        Raises:
            PublishError: If the intent could not be published
        """
        intent = GroupDeleteIntent(bucket=bucket, charid=charid)
        message_id = self.bus.publish(intent.action, encode_intent(intent))

        logger.info(
            "Queued deletion of character faceclaims",
            extra={"bucket": bucket, "charid": charid, "message_id": message_id},
        )
        return message_id
