"""Business logic for faceclaim ingestion.

This module downloads a remote image, converts it to WebP, and stores it
under an owner-scoped key, translating every failure into an IngestError.
"""

from aws_lambda_powertools import Logger

from core.codec import WebPCodec
from core.config import ServiceConfig
from core.infrastructure.adapters.s3_adapter import S3Adapter
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.infrastructure.http.image_fetcher import ImageFetcher
from core.naming import ObjectNamer
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import FACECLAIM_CONTENT_TYPE, FACECLAIM_EXTENSION

from .models import FaceclaimUploadRequest

logger = Logger(UTC=True)


class IngestionService:
    """Application service responsible for faceclaim ingestion.

    This service orchestrates:
    - Downloading the source image
    - Converting it to WebP
    - Choosing the bucket and object key
    - Uploading the result with descriptive metadata
    """

    def __init__(
        self,
        config: ServiceConfig,
        *,
        storage: ObjectStorageRepository | None = None,
        fetcher: ImageFetcher | None = None,
        codec: WebPCodec | None = None,
        namer: ObjectNamer | None = None,
    ) -> None:
        self.config = config
        self.storage = storage or S3ObjectStorage(S3Adapter(config))
        self.fetcher = fetcher or ImageFetcher()
        self.codec = codec or WebPCodec()
        self.namer = namer or ObjectNamer()

    def resolve_bucket(self, request: FaceclaimUploadRequest) -> str:
        """Return the override bucket if given, else the configured default."""
        if request.bucket:
            logger.info("Using specified bucket", extra={"bucket": request.bucket})
            return request.bucket

        logger.info(
            "Bucket not specified; using default",
            extra={"bucket": self.config.faceclaim_bucket},
        )
        return self.config.faceclaim_bucket

    @staticmethod
    def public_url(bucket: str, key: str) -> str:
        return f"https://{bucket}/{key}"

    def ingest(self, request: FaceclaimUploadRequest) -> str:
        """Ingest a faceclaim and return its public URL.

        The ingestion flow is:
        1. Download the source image
        2. Convert it to WebP at fixed quality
        3. Resolve the bucket and generate a fresh key
        4. Upload with content type and metadata

        Args:
            request: Validated upload request

        Returns:
            `https://{bucket}/{charid}/{id}.webp`

        Raises:
            FetchError: If the download fails
            CodecError: If conversion fails
            StorageError: If the upload fails
        """
        logger.debug(
            "Starting faceclaim ingestion",
            extra={"charid": request.charid, "image_url": request.image_url},
        )

        source = self.fetcher.fetch(request.image_url)
        converted = self.codec.convert(source)

        bucket = self.resolve_bucket(request)
        key = self.namer.name(request.charid, FACECLAIM_EXTENSION)

        self.storage.put(
            bucket=bucket,
            key=key,
            data=converted,
            content_type=FACECLAIM_CONTENT_TYPE,
            metadata=request.object_metadata(),
        )

        url = self.public_url(bucket, key)
        logger.info(
            "Faceclaim stored",
            extra={"charid": request.charid, "bucket": bucket, "key": key, "url": url},
        )
        return url
