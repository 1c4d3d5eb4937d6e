"""Single-shot HTTP fetching with classified errors."""

import logging

import requests

from applecast.config.schema import AcquisitionConfig
from applecast.utils.errors import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch remote documents as text.

    Each call opens its own session and closes it before returning, so no
    connection outlives the request. There are no retries.

    Example:
        >>> fetcher = PageFetcher(AcquisitionConfig())
        >>> html = fetcher.fetch("https://podcasts.apple.com/us/podcast/id840986946")
    """

    def __init__(self, config: AcquisitionConfig | None = None):
        """Initialize the fetcher.

        Args:
            config: Run configuration (defaults used if None)
        """
        self.config = config or AcquisitionConfig()

    def _new_session(self) -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = self.config.user_agent
        session.max_redirects = self.config.max_redirects
        return session

    def fetch(self, url: str) -> str:
        """GET a URL and return its body as text.

        Args:
            url: Absolute http(s) URL

        Returns:
            Full response body decoded as text

        Raises:
            NetworkError: If the host cannot be reached or the transfer fails
            HttpStatusError: If the response status is not 2xx
        """
        logger.debug(f"GET {url}")

        with self._new_session() as session:
            try:
                response = session.get(url, timeout=self.config.timeout_seconds)
            except requests.RequestException as e:
                raise NetworkError(f"Failed to fetch URL: {e}") from e

            with response:
                if not 200 <= response.status_code < 300:
                    raise HttpStatusError(
                        response.status_code, url=url, reason=response.reason or ""
                    )

                # requests falls back to ISO-8859-1 for text/* without a charset
                content_type = response.headers.get("Content-Type", "")
                if "charset" not in content_type.lower():
                    response.encoding = "utf-8"

                body = response.text

        logger.debug(f"Fetched {len(body)} characters from {url}")
        return body
