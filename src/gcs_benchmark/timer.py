import logging
import time
from collections.abc import Callable, Mapping

import httpx

from gcs_benchmark.constants import DEFAULT_TIME_TAKEN

logger = logging.getLogger(__name__)


class TransferTimer:
    """Time single HTTP transfers with httpx."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.perf_counter,
        stream_transfer: bool = True,
    ):
        """
        Initialize the timer.

        Args:
            transport: Optional httpx transport, used instead of the network
            clock: Function returning the current time in seconds
            stream_transfer: Whether to stream download bodies instead of buffering them
        """
        self.transport = transport
        self.clock = clock
        self.stream_transfer = stream_transfer
        self.last_url: str | None = None

    def _client(self) -> httpx.AsyncClient:
        # Transfers are never timed out
        return httpx.AsyncClient(
            timeout=httpx.Timeout(None),
            follow_redirects=True,
            transport=self.transport,
        )

    async def time_get(self, url: str) -> float:
        """
        Download a URL and discard the body.

        Args:
            url: Fully formed URL of the object

        Returns:
            Elapsed time in milliseconds, or DEFAULT_TIME_TAKEN if the request failed
        """
        self.last_url = url

        async with self._client() as client:
            start_time = self.clock()
            try:
                if self.stream_transfer:
                    async with client.stream("GET", url) as response:
                        response.raise_for_status()
                        async for _ in response.aiter_bytes(chunk_size=65536):
                            pass
                else:
                    response = await client.get(url)
                    response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                _log_failure("GET", url, exc)
                return DEFAULT_TIME_TAKEN

            return (self.clock() - start_time) * 1000

    async def time_put(
        self, url: str, content: bytes, headers: Mapping[str, str]
    ) -> float:
        """
        Upload content to a URL.

        Args:
            url: Upload target, usually a signed URL
            content: Request body
            headers: Request headers

        Returns:
            Elapsed time in milliseconds, or DEFAULT_TIME_TAKEN if the request failed
        """
        self.last_url = url

        async with self._client() as client:
            start_time = self.clock()
            try:
                response = await client.put(url, content=content, headers=headers)
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                _log_failure("PUT", url, exc)
                return DEFAULT_TIME_TAKEN

            return (self.clock() - start_time) * 1000


def _log_failure(method: str, url: str, exc: Exception):
    error_msg = f"{method} {url} failed: {exc}"
    response = getattr(exc, "response", None)
    if response is not None:
        error_msg += f" (status code {response.status_code})"
    logger.warning(error_msg)
