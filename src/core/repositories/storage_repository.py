"""Abstract contract for object storage."""

from abc import ABC, abstractmethod


class ObjectStorageRepository(ABC):
    """Contract for storing and removing objects in named buckets.

    Implementations could be S3, GCS, local disk, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def put(
        self,
        *,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Store an object.

        Success means the object is readable at `bucket/key` right away.

        Args:
            bucket: Target bucket name
            key: Object key within the bucket
            data: Object content
            content_type: MIME type (e.g., 'image/webp')
            metadata: Optional descriptive string pairs

        Raises:
            StorageError: If the upload fails or exceeds its deadline
        """

    @abstractmethod
    def exists(self, *, bucket: str, key: str) -> bool:
        """Return whether an object exists.

        Raises:
            StorageError: If the check itself fails
        """

    @abstractmethod
    def delete(self, *, bucket: str, key: str) -> None:
        """Delete an object. Deleting a missing object is not an error.

        Raises:
            StorageError: If deletion fails
        """

    @abstractmethod
    def delete_prefix(self, *, bucket: str, prefix: str) -> int:
        """Delete every object whose key starts with `prefix`.

        Returns:
            Number of objects deleted

        Raises:
            StorageError: If listing or deletion fails
        """
