"""
Pytest configuration and fixtures for faceclaim service tests.
Provides environment setup, AWS mocking, S3 and SQS fixtures, and sample images.
"""

import os

# Handler modules load configuration at import time, so the environment must
# be in place before any test module is collected.
os.environ["API_TOKEN"] = "test-token"
os.environ["FACECLAIM_BUCKET"] = "pcs.inconnu.app"
os.environ["LOG_BUCKET"] = "inconnu-logs"
os.environ["AWS_REGION"] = "us-east-1"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_SECURITY_TOKEN"] = "testing"
os.environ["AWS_SESSION_TOKEN"] = "testing"
os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"
os.environ["POWERTOOLS_SERVICE_NAME"] = "faceclaims-test"
os.environ.pop("AWS_ENDPOINT_URL", None)

from collections.abc import Callable, Iterator
from io import BytesIO
import json
import struct
from types import SimpleNamespace
from typing import Any
import zlib

import boto3
from botocore.exceptions import ClientError
from moto import mock_aws
from PIL import Image
import pytest

from core.config import ServiceConfig, load_config
from core.utils.constants import ACTION_DELETE_GROUP, ACTION_DELETE_SINGLE

DEFAULT_BUCKET = "pcs.inconnu.app"
OVERRIDE_BUCKET = "pcs.botch.lol"
LOG_BUCKET = "inconnu-logs"
API_TOKEN = "test-token"


# ============================================================================
# Configuration
# ============================================================================


@pytest.fixture
def service_config() -> ServiceConfig:
    return load_config()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": API_TOKEN}


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


# ============================================================================
# AWS
# ============================================================================


@pytest.fixture(scope="function")
def aws_mock() -> Iterator[None]:
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_buckets(s3_client):
    """
    Create the default, override, and log buckets.

    moto discards everything when the mock context exits.
    """
    for bucket in (DEFAULT_BUCKET, OVERRIDE_BUCKET, LOG_BUCKET):
        try:
            s3_client.create_bucket(Bucket=bucket)
        except ClientError as e:
            if e.response["Error"]["Code"] != "BucketAlreadyOwnedByYou":
                raise

    yield s3_client


@pytest.fixture
def s3_object_exists(s3_client) -> Callable[[str, str], bool]:
    """
    Helper to check an object's existence, like a HEAD on its public URL.

    Usage:
        assert s3_object_exists("pcs.inconnu.app", "__test/abc.webp")
    """

    def _exists(bucket: str, key: str) -> bool:
        try:
            s3_client.head_object(Bucket=bucket, Key=key)
            return True
        except ClientError as e:
            if e.response["Error"]["Code"] in ("404", "NoSuchKey", "NotFound"):
                return False
            raise

    return _exists


@pytest.fixture
def s3_list_keys(s3_client) -> Callable[[str, str], list[str]]:
    def _list(bucket: str, prefix: str = "") -> list[str]:
        response = s3_client.list_objects_v2(Bucket=bucket, Prefix=prefix)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def s3_put_object(s3_client) -> Callable[..., None]:
    def _put(bucket: str, key: str, body: bytes = b"data") -> None:
        s3_client.put_object(Bucket=bucket, Key=key, Body=body)

    return _put


@pytest.fixture(scope="function")
def sqs_client(aws_mock):
    return boto3.client("sqs", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def sqs_queues(sqs_client) -> dict[str, str]:
    """Create both deletion queues and return their URLs keyed by name."""
    return {
        name: sqs_client.create_queue(QueueName=name)["QueueUrl"]
        for name in (ACTION_DELETE_SINGLE, ACTION_DELETE_GROUP)
    }


@pytest.fixture
def sqs_receive(sqs_client, sqs_queues) -> Callable[[str], list[dict[str, Any]]]:
    """
    Helper to drain a deletion queue.

    Usage:
        messages = sqs_receive("delete-single-faceclaim")
    """

    def _receive(queue_name: str) -> list[dict[str, Any]]:
        response = sqs_client.receive_message(
            QueueUrl=sqs_queues[queue_name],
            MaxNumberOfMessages=10,
        )
        return list(response.get("Messages", []))

    return _receive


def _sqs_record(body: str, message_id: str, receipt_handle: str = "") -> dict[str, Any]:
    return {
        "messageId": message_id,
        "receiptHandle": receipt_handle or f"handle-{message_id}",
        "body": body,
        "attributes": {},
        "messageAttributes": {},
        "md5OfBody": "",
        "eventSource": "aws:sqs",
        "eventSourceARN": "arn:aws:sqs:us-east-1:000000000000:faceclaims",
        "awsRegion": "us-east-1",
    }


@pytest.fixture
def sqs_event() -> Callable[[list[str | dict[str, Any]]], dict[str, Any]]:
    """
    Helper to build a Lambda SQS event from message bodies.

    Usage:
        event = sqs_event([{"action": "delete-faceclaim-group", ...}, "not-json"])
    """

    def _event(bodies: list[str | dict[str, Any]]) -> dict[str, Any]:
        return {
            "Records": [
                _sqs_record(
                    body if isinstance(body, str) else json.dumps(body),
                    f"msg-{index}",
                )
                for index, body in enumerate(bodies)
            ]
        }

    return _event


@pytest.fixture
def sqs_event_from_messages() -> Callable[[list[dict[str, Any]]], dict[str, Any]]:
    """Wrap messages received from SQS in a Lambda SQS event."""

    def _event(messages: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "Records": [
                _sqs_record(m["Body"], m["MessageId"], m["ReceiptHandle"])
                for m in messages
            ]
        }

    return _event


# ============================================================================
# Images
# ============================================================================


def _make_image(
    fmt: str,
    mode: str = "RGB",
    size: tuple[int, int] = (8, 8),
    color: Any = (200, 30, 30),
) -> bytes:
    buf = BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def is_webp() -> Callable[[bytes], bool]:
    def _check(data: bytes) -> bool:
        return data[:4] == b"RIFF" and data[8:12] == b"WEBP"

    return _check


@pytest.fixture
def sample_png_bytes() -> bytes:
    return _make_image("PNG")


@pytest.fixture
def sample_rgba_png_bytes() -> bytes:
    return _make_image("PNG", mode="RGBA", color=(10, 20, 30, 128))


@pytest.fixture
def sample_jpeg_bytes() -> bytes:
    return _make_image("JPEG")


@pytest.fixture
def sample_gif_bytes() -> bytes:
    return _make_image("GIF", mode="P", color=3)


@pytest.fixture
def faceclaim_body() -> dict[str, Any]:
    return {
        "guild": 987654321,
        "user": 123456789,
        "charid": "__test",
        "image_url": "https://example.org/tiltowait.webp",
    }


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def oversized_png_bytes() -> bytes:
    """PNG header declaring 20000x20000 pixels, past Pillow's bomb limit."""
    header = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", header) + _png_chunk(b"IEND", b"")


@pytest.fixture
def api_event(auth_headers) -> Callable[..., dict[str, Any]]:
    """
    Helper to build an API Gateway proxy event.

    Usage:
        event = api_event("POST", "/faceclaim/upload", body={...})
        event = api_event("DELETE", "/faceclaim/delete/b/c/all", headers={})
    """

    def _event(
        method: str,
        path: str,
        *,
        body: dict[str, Any] | str | None = None,
        headers: dict[str, str] | None = None,
        path_params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": path,
            "headers": dict(auth_headers if headers is None else headers),
            "pathParameters": path_params,
            "body": json.dumps(body) if isinstance(body, dict) else body,
            "isBase64Encoded": False,
        }

    return _event
