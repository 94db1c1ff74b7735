"""Business logic for log archival."""

from aws_lambda_powertools import Logger

from core.config import ServiceConfig
from core.infrastructure.adapters.s3_adapter import S3Adapter
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import LOG_CONTENT_TYPE

from .models import LogUploadRequest

logger = Logger(UTC=True)


class LogUploadService:
    """Stores log files unchanged in the log bucket."""

    def __init__(
        self,
        config: ServiceConfig,
        *,
        storage: ObjectStorageRepository | None = None,
    ) -> None:
        self.bucket = config.log_bucket
        self.storage = storage or S3ObjectStorage(S3Adapter(config))

    def upload(self, request: LogUploadRequest) -> str:
        """Store the log under its filename, replacing any existing object.

        Raises:
            StorageError: If the upload fails
        """
        self.storage.put(
            bucket=self.bucket,
            key=request.filename,
            data=request.content,
            content_type=LOG_CONTENT_TYPE,
        )
        logger.info(
            "Log uploaded",
            extra={"bucket": self.bucket, "key": request.filename, "size": len(request.content)},
        )
        return request.filename
