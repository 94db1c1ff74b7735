"""Applies deletion intents received from the message bus.

Intents may be delivered more than once and in any order, so every
operation here is idempotent: deleting something already gone succeeds.
"""

from aws_lambda_powertools import Logger

from core.models.delete_intent import GroupDeleteIntent, SingleDeleteIntent
from core.naming import ObjectNamer
from core.repositories.storage_repository import ObjectStorageRepository

logger = Logger(UTC=True)


class DeletionConsumer:
    """Deletes the objects named by a delete intent."""

    def __init__(self, storage: ObjectStorageRepository) -> None:
        self.storage = storage

    def apply(self, intent: SingleDeleteIntent | GroupDeleteIntent) -> int:
        """Carry out an intent and return how many objects were targeted.

        Raises:
            StorageError: If storage rejects the deletion
        """
        if isinstance(intent, SingleDeleteIntent):
            self.storage.delete(bucket=intent.bucket, key=intent.key)
            logger.info(
                "Deleted faceclaim",
                extra={"bucket": intent.bucket, "key": intent.key},
            )
            return 1

        count = self.storage.delete_prefix(
            bucket=intent.bucket,
            prefix=ObjectNamer.owner_prefix(intent.charid),
        )
        logger.info(
            "Deleted character faceclaims",
            extra={"bucket": intent.bucket, "charid": intent.charid, "count": count},
        )
        return count
