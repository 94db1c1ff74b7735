"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"

# Auth Errors
ERROR_CODE_UNAUTHORIZED = "Unauthorized"

# Ingestion Errors
ERROR_CODE_INGEST_FAILED = "INGEST_FAILED"
ERROR_CODE_IMAGE_FETCH_FAILED = "IMAGE_FETCH_FAILED"
ERROR_CODE_IMAGE_CONVERSION_FAILED = "IMAGE_CONVERSION_FAILED"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_OBJECT_UPLOAD_FAILED = "OBJECT_UPLOAD_FAILED"
ERROR_CODE_OBJECT_DELETE_FAILED = "OBJECT_DELETE_FAILED"

# Messaging Errors
ERROR_CODE_PUBLISH_FAILED = "PUBLISH_FAILED"

# Configuration Errors
ERROR_CODE_CONFIG_MISSING = "CONFIG_MISSING"

# Routing
ERROR_CODE_ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

# ============================================================================
# Faceclaim Conversion
# ============================================================================

WEBP_QUALITY: Final[int] = 99
FACECLAIM_EXTENSION: Final[str] = "webp"
FACECLAIM_CONTENT_TYPE: Final[str] = f"image/{FACECLAIM_EXTENSION}"

# Seconds
IMAGE_FETCH_TIMEOUT: Final[float] = 30.0
STORAGE_CONNECT_TIMEOUT: Final[float] = 10.0
STORAGE_READ_TIMEOUT: Final[float] = 50.0

# ============================================================================
# Deletion Intents
# ============================================================================

ACTION_DELETE_SINGLE: Final[str] = "delete-single-faceclaim"
ACTION_DELETE_GROUP: Final[str] = "delete-faceclaim-group"

# Path segment that selects group deletion
GROUP_DELETE_SEGMENT: Final[str] = "all"

# ============================================================================
# Log Upload
# ============================================================================

LOG_FILE_FIELD: Final[str] = "log_file"
LOG_CONTENT_TYPE: Final[str] = "text/plain"
DEFAULT_LOG_BUCKET: Final[str] = "inconnu-logs"

# ============================================================================
# API Gateway Configuration
# ============================================================================

AUTH_HEADER = "Authorization"
CORS_ORIGIN = "*"
CORS_METHODS = "POST,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_API_TOKEN = "API_TOKEN"
ENV_FACECLAIM_BUCKET = "FACECLAIM_BUCKET"
ENV_PORT = "PORT"
ENV_LOG_BUCKET = "LOG_BUCKET"
ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"

DEFAULT_PORT = "8080"

# ============================================================================
# Faceclaim Request Constraints
# ============================================================================

# Owner ids become key prefixes, so they may not contain a path separator
PATH_SEGMENT_PATTERN = r"^[^/]+$"
