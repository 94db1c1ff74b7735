"""Thin adapter for interacting with Amazon SQS."""

from typing import Any, Protocol

import boto3

from core.config import ServiceConfig


class _Boto3SQSClient(Protocol):
    """Internal typing for boto3 SQS client (AWS-facing only)."""

    def get_queue_url(self, *, QueueName: str) -> dict[str, Any]: ...

    def send_message(self, *, QueueUrl: str, MessageBody: str) -> dict[str, Any]: ...


class SQSAdapterProtocol(Protocol):
    """Minimal SQS adapter protocol (bus-facing)."""

    def send_message(self, *, queue_name: str, body: str) -> str: ...


class SQSAdapter:
    """Low-level SQS operations (mechanical, no error handling).

    Queues are addressed by name; the URL is resolved on every send.
    """

    def __init__(self, config: ServiceConfig) -> None:
        self._client: _Boto3SQSClient = boto3.client(
            "sqs",
            endpoint_url=config.aws_endpoint_url,
            region_name=config.aws_region,
        )

    def send_message(self, *, queue_name: str, body: str) -> str:
        """Send `body` to the named queue and return the broker's message id.
        Raises boto3 exceptions - caught by domain implementation.
        """
        queue_url = self._client.get_queue_url(QueueName=queue_name)["QueueUrl"]
        response = self._client.send_message(QueueUrl=queue_url, MessageBody=body)
        return str(response["MessageId"])
