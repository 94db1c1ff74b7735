"""Custom exception classes for the faceclaim service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_CONFIG_MISSING,
    ERROR_CODE_IMAGE_CONVERSION_FAILED,
    ERROR_CODE_IMAGE_FETCH_FAILED,
    ERROR_CODE_INGEST_FAILED,
    ERROR_CODE_PUBLISH_FAILED,
    ERROR_CODE_STORAGE,
    ERROR_CODE_UNAUTHORIZED,
    ERROR_CODE_VALIDATION_FAILED,
)


class FaceclaimServiceError(Exception):
    """
    Base exception for all faceclaim service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(FaceclaimServiceError):
    """Raised when a request body or path is malformed."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class AuthError(FaceclaimServiceError):
    """Raised when the Authorization header does not match the API token."""

    def __init__(
        self,
        *,
        message: str = "Unauthorized",
        error_code: str = ERROR_CODE_UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class IngestError(FaceclaimServiceError):
    """Raised when a faceclaim cannot be fetched, converted, or stored.

    Callers only see the message; the subclass is for logging.
    """

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INGEST_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FetchError(IngestError):
    """Raised when the source image cannot be downloaded."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_IMAGE_FETCH_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class CodecError(IngestError):
    """Raised when the downloaded bytes cannot be converted."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_IMAGE_CONVERSION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StorageError(IngestError):
    """Raised when an object storage operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PublishError(FaceclaimServiceError):
    """Raised when the message bus rejects a message or times out."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PUBLISH_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FatalConfigError(FaceclaimServiceError):
    """Raised at cold start when a required setting is missing."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIG_MISSING,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
