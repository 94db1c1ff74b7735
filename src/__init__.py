"""Faceclaim Storage Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless faceclaim ingestion and deletion service using AWS Lambda, S3, and SQS"
)

__all__ = ["handlers", "core"]
