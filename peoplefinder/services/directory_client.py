# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Directory client: the only outbound HTTP call.
GET <PEOPLEFINDER_URL>?q=<query>, decoded into a typed ResultSet.
"""

import time
from typing import Optional

import httpx
from pydantic import ValidationError

from peoplefinder.core.config import settings
from peoplefinder.core.errors import DirectoryRequestError
from peoplefinder.core.logging import get_logger
from peoplefinder.metrics import DIRECTORY_LATENCY, DIRECTORY_REQUESTS
from peoplefinder.models.domain import DirectoryResponse, ResultSet

logger = get_logger(__name__)


class DirectoryClient:
    """Synchronous PeopleFinder client. Holds no state between calls."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url or settings.PEOPLEFINDER_URL
        self._timeout = timeout if timeout is not None else settings.PEOPLEFINDER_TIMEOUT
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get(self, query: str) -> httpx.Response:
        with httpx.Client(timeout=self._timeout, transport=self._transport,
                          follow_redirects=True) as client:
            return client.get(self._base_url, params={"q": query})

    def search(self, query: str) -> ResultSet:
        """Run a query. Raises DirectoryRequestError on any transport or decode failure."""
        start = time.monotonic()
        try:
            resp = self._get(query)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            DIRECTORY_REQUESTS.labels(outcome="unreachable").inc()
            logger.warning("PeopleFinder request failed: query=%s, error=%s", query, exc)
            raise DirectoryRequestError(str(exc)) from exc
        finally:
            DIRECTORY_LATENCY.observe(time.monotonic() - start)

        try:
            payload = DirectoryResponse.model_validate_json(resp.text)
        except ValidationError as exc:
            DIRECTORY_REQUESTS.labels(outcome="malformed").inc()
            logger.warning("PeopleFinder returned a malformed body: query=%s", query)
            raise DirectoryRequestError(
                f"malformed response ({exc.error_count()} validation errors)"
            ) from exc

        DIRECTORY_REQUESTS.labels(outcome="ok").inc()
        logger.debug(
            "PeopleFinder query=%s matched %d", query, payload.result_set.total_results_available
        )
        return payload.result_set

    def verify_connection(self) -> None:
        """Probe the endpoint. Raises DirectoryRequestError if it is down or failing."""
        try:
            resp = self._get("")
        except httpx.HTTPError as exc:
            raise DirectoryRequestError(str(exc)) from exc
        if resp.status_code >= 500:
            raise DirectoryRequestError(f"PeopleFinder answered HTTP {resp.status_code}")
