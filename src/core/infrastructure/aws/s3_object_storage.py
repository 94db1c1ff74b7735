"""S3-backed implementation of ObjectStorageRepository."""

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from core.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from core.models.errors import StorageError
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import (
    ERROR_CODE_OBJECT_DELETE_FAILED,
    ERROR_CODE_OBJECT_UPLOAD_FAILED,
)

logger = Logger(UTC=True)

_MISSING_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3ObjectStorage(ObjectStorageRepository):
    """Object storage implementation backed by Amazon S3."""

    def __init__(self, adapter: S3AdapterProtocol) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3 = adapter

    def put(
        self,
        *,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Upload bytes to `bucket/key`."""
        logger.debug(
            "Uploading object",
            extra={"bucket": bucket, "key": key, "size": len(data)},
        )

        try:
            self._s3.put_object(
                bucket=bucket,
                key=key,
                body=data,
                content_type=content_type,
                metadata=metadata or {},
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "S3 upload failed",
                extra={"bucket": bucket, "key": key, "error": str(exc)},
            )
            raise StorageError(
                message=f"processImage: {exc}",
                error_code=ERROR_CODE_OBJECT_UPLOAD_FAILED,
                details={"bucket": bucket, "key": key},
            ) from exc

        logger.info(f"{key} uploaded to {bucket}", extra={"bucket": bucket, "key": key})

    def exists(self, *, bucket: str, key: str) -> bool:
        try:
            self._s3.head_object(bucket=bucket, key=key)
            return True
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise StorageError(
                message=f"Unable to check object: {exc}",
                details={"bucket": bucket, "key": key},
            ) from exc
        except BotoCoreError as exc:
            raise StorageError(
                message=f"Unable to check object: {exc}",
                details={"bucket": bucket, "key": key},
            ) from exc

    def delete(self, *, bucket: str, key: str) -> None:
        logger.debug("Deleting object", extra={"bucket": bucket, "key": key})

        try:
            # S3 DeleteObject succeeds for missing keys
            self._s3.delete_object(bucket=bucket, key=key)
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "S3 deletion failed",
                extra={"bucket": bucket, "key": key, "error": str(exc)},
            )
            raise StorageError(
                message=f"Unable to delete {key}: {exc}",
                error_code=ERROR_CODE_OBJECT_DELETE_FAILED,
                details={"bucket": bucket, "key": key},
            ) from exc

        logger.info("Object deleted", extra={"bucket": bucket, "key": key})

    def delete_prefix(self, *, bucket: str, prefix: str) -> int:
        if not prefix:
            # An empty prefix would match the whole bucket
            raise StorageError(
                message="Refusing to delete with an empty prefix",
                error_code=ERROR_CODE_OBJECT_DELETE_FAILED,
                details={"bucket": bucket},
            )

        deleted = 0
        try:
            for keys in self._s3.iter_keys(bucket=bucket, prefix=prefix):
                response = self._s3.delete_objects(bucket=bucket, keys=keys)
                errors = response.get("Errors") or []
                if errors:
                    raise StorageError(
                        message=f"Unable to delete {len(errors)} objects under {prefix}",
                        error_code=ERROR_CODE_OBJECT_DELETE_FAILED,
                        details={"bucket": bucket, "prefix": prefix, "errors": errors},
                    )
                deleted += len(keys)
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "S3 prefix deletion failed",
                extra={"bucket": bucket, "prefix": prefix, "error": str(exc)},
            )
            raise StorageError(
                message=f"Unable to delete objects under {prefix}: {exc}",
                error_code=ERROR_CODE_OBJECT_DELETE_FAILED,
                details={"bucket": bucket, "prefix": prefix},
            ) from exc

        logger.info(
            "Objects deleted",
            extra={"bucket": bucket, "prefix": prefix, "count": deleted},
        )
        return deleted
