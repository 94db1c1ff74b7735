"""Thin adapter for interacting with Amazon S3."""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

import boto3
from botocore.config import Config

from core.config import ServiceConfig
from core.utils.constants import STORAGE_CONNECT_TIMEOUT, STORAGE_READ_TIMEOUT


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
        Metadata: Mapping[str, str],
    ) -> Any: ...

    def head_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Mapping[str, Any]: ...

    def delete_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Any: ...

    def delete_objects(
        self,
        *,
        Bucket: str,
        Delete: Mapping[str, Any],
    ) -> Mapping[str, Any]: ...

    def get_paginator(self, operation_name: str) -> Any: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    def put_object(
        self,
        *,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None: ...

    def head_object(self, *, bucket: str, key: str) -> Mapping[str, Any]: ...

    def delete_object(self, *, bucket: str, key: str) -> None: ...

    def delete_objects(self, *, bucket: str, keys: list[str]) -> Mapping[str, Any]: ...

    def iter_keys(self, *, bucket: str, prefix: str) -> Iterator[list[str]]: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client
    - Takes the bucket per call, since requests may override it
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, config: ServiceConfig) -> None:
        """Create S3 client from service configuration."""
        self._client: _Boto3S3Client = boto3.client(
            "s3",
            endpoint_url=config.aws_endpoint_url,
            region_name=config.aws_region,
            config=Config(
                connect_timeout=STORAGE_CONNECT_TIMEOUT,
                read_timeout=STORAGE_READ_TIMEOUT,
            ),
        )

    def put_object(
        self,
        *,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            Metadata=metadata,
        )

    def head_object(self, *, bucket: str, key: str) -> Mapping[str, Any]:
        """Fetch object headers from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        return self._client.head_object(Bucket=bucket, Key=key)

    def delete_object(self, *, bucket: str, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.delete_object(Bucket=bucket, Key=key)

    def delete_objects(self, *, bucket: str, keys: list[str]) -> Mapping[str, Any]:
        """Delete up to 1000 objects in one request."""
        return self._client.delete_objects(
            Bucket=bucket,
            Delete={"Objects": [{"Key": key} for key in keys], "Quiet": True},
        )

    def iter_keys(self, *, bucket: str, prefix: str) -> Iterator[list[str]]:
        """Yield object keys under `prefix`, one list per listing page."""
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
            keys = [obj["Key"] for obj in page.get("Contents", [])]
            if keys:
                yield keys
