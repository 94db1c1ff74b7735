"""Downloads source images over HTTP."""

from aws_lambda_powertools import Logger
import requests

from core.models.errors import FetchError
from core.utils.constants import IMAGE_FETCH_TIMEOUT

logger = Logger(UTC=True)


class ImageFetcher:
    """Blocking HTTP download of a remote image."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = IMAGE_FETCH_TIMEOUT,
    ) -> None:
        # Without a session each download uses its own short-lived connection
        self._get = session.get if session is not None else requests.get
        self._timeout = timeout

    def fetch(self, url: str) -> bytes:
        """Download `url` and return the response body.

        Raises:
            FetchError: On transport failure or a non-2xx response
        """
        logger.debug("Downloading image", extra={"url": url})

        try:
            response = self._get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning(
                "Image download failed",
                extra={"url": url, "error": str(exc)},
            )
            raise FetchError(
                message=f"http.Get: {exc}",
                details={"url": url},
            ) from exc

        content = response.content
        logger.info(
            "File downloaded; converting to WebP",
            extra={"url": url, "size": len(content)},
        )
        return content
