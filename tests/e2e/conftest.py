"""
Fixtures for tests against a deployed faceclaim API.

Skipped unless FACECLAIM_API_URL and FACECLAIM_API_TOKEN are set. Objects
are checked directly in S3, so AWS credentials (and AWS_ENDPOINT_URL for
LocalStack) must point at the same account as the deployment.
"""

import logging
import os
import time
from collections.abc import Callable
from urllib.parse import urlparse

import boto3
from botocore.exceptions import ClientError
import pytest
import requests

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

API_URL = os.getenv("FACECLAIM_API_URL", "")
API_TOKEN = os.getenv("FACECLAIM_API_TOKEN")
TEST_IMAGE_URL = os.getenv(
    "FACECLAIM_TEST_IMAGE_URL",
    "https://www.python.org/static/community_logos/python-logo-master-v3-TM.png",
)
TEST_CHARID = "__e2e_test"
DELETION_TIMEOUT = 60.0


class E2EAPIClient:
    """Wrapper for making HTTP requests to the API"""

    def __init__(self, endpoint: str, headers: dict[str, str]) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.headers = headers

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        h = self.headers.copy()
        if headers is not None:
            h = headers
        return h

    def post(self, path, data, headers=None):
        """Make POST request"""
        return requests.post(
            f"{self.endpoint}{path}", json=data, headers=self._headers(headers), timeout=60
        )

    def post_file(self, path, field, filename, content, headers=None):
        """Make multipart POST request"""
        return requests.post(
            f"{self.endpoint}{path}",
            files={field: (filename, content, "text/plain")},
            headers=self._headers(headers),
            timeout=60,
        )

    def delete(self, path, headers=None):
        """Make DELETE request"""
        return requests.delete(f"{self.endpoint}{path}", headers=self._headers(headers), timeout=60)


@pytest.fixture(scope="session")
def api_client():
    if not API_URL or API_TOKEN is None:
        pytest.skip("FACECLAIM_API_URL and FACECLAIM_API_TOKEN are not set")
    return E2EAPIClient(API_URL, {"Authorization": API_TOKEN})


@pytest.fixture(scope="session")
def s3():
    return boto3.client("s3", endpoint_url=os.getenv("AWS_ENDPOINT_URL"))


@pytest.fixture
def upload_payload() -> dict:
    return {
        "guild": 987654321,
        "user": 123456789,
        "charid": TEST_CHARID,
        "image_url": TEST_IMAGE_URL,
    }


def _split_url(url: str) -> tuple[str, str]:
    parsed = urlparse(url)
    return parsed.netloc, parsed.path.lstrip("/")


@pytest.fixture
def e2e_charid() -> str:
    return TEST_CHARID


@pytest.fixture
def split_url() -> Callable[[str], tuple[str, str]]:
    """Return (bucket, key) for a faceclaim URL."""
    return _split_url


@pytest.fixture
def object_exists(s3) -> Callable[[str], bool]:
    def _exists(url: str) -> bool:
        bucket, key = _split_url(url)
        try:
            s3.head_object(Bucket=bucket, Key=key)
            return True
        except ClientError as err:
            if err.response["Error"]["Code"] in ("404", "NoSuchKey", "NotFound"):
                return False
            raise

    return _exists


@pytest.fixture
def wait_until_deleted(object_exists) -> Callable[[list[str]], bool]:
    """Poll until every URL is gone; deletion happens asynchronously."""

    def _wait(urls: list[str]) -> bool:
        deadline = time.monotonic() + DELETION_TIMEOUT
        while time.monotonic() < deadline:
            remaining = [url for url in urls if object_exists(url)]
            if not remaining:
                return True
            logger.info("Waiting for %d objects to be deleted", len(remaining))
            time.sleep(2)
        return False

    return _wait
