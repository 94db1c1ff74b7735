from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture
def upload_faceclaim_event(api_event, faceclaim_body) -> dict[str, Any]:
    return api_event("POST", "/faceclaim/upload", body=faceclaim_body)


@pytest.fixture
def delete_faceclaim_event(api_event) -> dict[str, Any]:
    return api_event(
        "DELETE",
        "/faceclaim/delete/pcs.inconnu.app/__test/abc123.webp",
        path_params={"bucket": "pcs.inconnu.app", "charid": "__test", "key": "abc123.webp"},
    )


@pytest.fixture
def delete_faceclaim_group_event(api_event) -> dict[str, Any]:
    return api_event(
        "DELETE",
        "/faceclaim/delete/pcs.inconnu.app/__test/all",
        path_params={"bucket": "pcs.inconnu.app", "charid": "__test"},
    )


@pytest.fixture
def multipart_body() -> Callable[..., tuple[bytes, str]]:
    """
    Helper to encode a multipart/form-data body.

    Returns:
        (body, content_type)
    """

    def _encode(
        field: str = "log_file",
        filename: str | None = "bot.log",
        content: bytes = b"line one\nline two\n",
    ) -> tuple[bytes, str]:
        boundary = "----faceclaimtestboundary"
        disposition = f'form-data; name="{field}"'
        if filename is not None:
            disposition += f'; filename="{filename}"'

        body = (
            f"--{boundary}\r\n"
            f"Content-Disposition: {disposition}\r\n"
            "Content-Type: text/plain\r\n"
            "\r\n"
        ).encode("utf-8") + content + f"\r\n--{boundary}--\r\n".encode("utf-8")

        return body, f"multipart/form-data; boundary={boundary}"

    return _encode
