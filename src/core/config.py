"""Process configuration read once from the environment.

The resulting `ServiceConfig` is immutable and is handed explicitly to the
services that need it.
"""

from collections.abc import Mapping
from functools import lru_cache
import os

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field

from core.models.errors import FatalConfigError
from core.utils.constants import (
    DEFAULT_LOG_BUCKET,
    DEFAULT_PORT,
    ENV_API_TOKEN,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_FACECLAIM_BUCKET,
    ENV_LOG_BUCKET,
    ENV_PORT,
)

logger = Logger(UTC=True)


class ServiceConfig(BaseModel):
    """Immutable service settings."""

    model_config = ConfigDict(frozen=True)

    api_token: str = Field(..., description="Shared secret expected in the Authorization header")
    faceclaim_bucket: str = Field(..., min_length=1, description="Default faceclaim bucket")
    port: str = Field(DEFAULT_PORT, description="Listen port for container runtimes")
    log_bucket: str = Field(DEFAULT_LOG_BUCKET, min_length=1, description="Bucket for log uploads")
    aws_region: str | None = None
    aws_endpoint_url: str | None = None


def load_config(environ: Mapping[str, str] | None = None) -> ServiceConfig:
    """Build a `ServiceConfig` from environment variables.

    `API_TOKEN` must be present but may be empty. `FACECLAIM_BUCKET` must be
    present and non-empty.

    Raises:
        FatalConfigError: If a required setting is missing
    """
    env = os.environ if environ is None else environ

    if ENV_API_TOKEN not in env:
        raise FatalConfigError(
            message=f"{ENV_API_TOKEN} is not set!",
            details={"variable": ENV_API_TOKEN},
        )

    bucket = env.get(ENV_FACECLAIM_BUCKET)
    if not bucket:
        raise FatalConfigError(
            message=f"{ENV_FACECLAIM_BUCKET} is not set!",
            details={"variable": ENV_FACECLAIM_BUCKET},
        )

    config = ServiceConfig(
        api_token=env[ENV_API_TOKEN],
        faceclaim_bucket=bucket,
        port=env.get(ENV_PORT) or DEFAULT_PORT,
        log_bucket=env.get(ENV_LOG_BUCKET) or DEFAULT_LOG_BUCKET,
        aws_region=env.get(ENV_AWS_REGION),
        aws_endpoint_url=env.get(ENV_AWS_ENDPOINT_URL),
    )

    logger.info(
        "Configuration loaded",
        extra={
            "faceclaim_bucket": config.faceclaim_bucket,
            "log_bucket": config.log_bucket,
            "port": config.port,
        },
    )
    return config


@lru_cache(maxsize=1)
def get_config() -> ServiceConfig:
    """Return the process-wide configuration, loading it on first use."""
    return load_config()
