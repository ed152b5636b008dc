"""
Document fetchers.

BaseFetcher is the seam the service depends on; HTTPFetcher is the
production implementation over a requests Session.  Tests inject their own
BaseFetcher so no network is needed.

Every failure is classified as exactly one of:
  DocumentNotFoundError: upstream answered 404
  TransientFetchError  : anything else (other status, timeout, connection)
There is no retry: each call performs at most one request.
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests

from .exceptions import DocumentNotFoundError, TransientFetchError
from .logger import get_module_logger
from .settings import Settings

logger = get_module_logger("fetcher")


class BaseFetcher(ABC):
    """Abstract base class for document fetchers."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """
        Fetch a resource and return its body as text.

        Args:
            url: Absolute URL of the page or raw file

        Returns:
            The response body

        Raises:
            DocumentNotFoundError: the resource does not exist
            TransientFetchError: any other failure
        """
        pass


class HTTPFetcher(BaseFetcher):
    """Fetches documents over HTTP with a fixed timeout and user agent."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None
    ):
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def fetch(self, url: str) -> str:
        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.settings.timeout)
        except requests.Timeout as e:
            raise TransientFetchError(
                f"Request to {url} timed out after {self.settings.timeout}s",
                url=url,
                details={"reason": str(e)}
            ) from e
        except requests.RequestException as e:
            raise TransientFetchError(
                f"Request to {url} failed: {e}",
                url=url,
                details={"reason": str(e)}
            ) from e

        if response.status_code == 404:
            raise DocumentNotFoundError(
                f"{url} returned 404",
                url=url,
                status=404
            )
        if response.status_code != 200:
            raise TransientFetchError(
                f"Request failed with status code {response.status_code}",
                url=url,
                status=response.status_code
            )

        logger.debug(f"Fetched {len(response.text)} chars from {url}")
        return response.text

    def close(self) -> None:
        self.session.close()
