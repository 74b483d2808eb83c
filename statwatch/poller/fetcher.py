import asyncio
import time
import logging

import aiohttp

from ..error_handler import ErrorType, StatsPollError, StatusError, TransportError, classify_error

logger = logging.getLogger(__name__)

USER_AGENT = 'Statwatch/1.0'


class StatsFetcher:
    """Issues one GET per call against the stats URL over a shared session.

    No retries happen here; the poll interval is the only retry mechanism.
    """

    def __init__(self, session: aiohttp.ClientSession, url: str, timeout_seconds: float = 3.0):
        self.session = session
        self.url = url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.last_status = None
        self.last_response_time = 0.0

    async def fetch(self) -> str:
        """Return the response body text.

        Raises:
            TransportError: connection, DNS or timeout failure
            StatusError: the server answered with a non-200 status
        """
        start_time = time.time()
        self.last_status = None

        try:
            headers = {'User-Agent': USER_AGENT}
            async with self.session.get(self.url, headers=headers, timeout=self.timeout) as response:
                self.last_status = response.status
                if response.status != 200:
                    raise StatusError(response.status, response.reason)

                body = await response.text(errors='replace')
        except (asyncio.TimeoutError, aiohttp.ClientError) as e:
            raise self._translate(e) from e
        finally:
            self.last_response_time = time.time() - start_time

        logger.debug(f"Fetched {len(body)} chars from {self.url} in {self.last_response_time:.3f}s")
        return body

    def _translate(self, error: Exception) -> StatsPollError:
        """Map an aiohttp/asyncio failure onto the poll error taxonomy"""
        error_type = classify_error(error)
        if error_type is ErrorType.HTTP_STATUS:
            self.last_status = error.status
            return StatusError(error.status, error.message)
        if isinstance(error, asyncio.TimeoutError):
            return TransportError(f"timed out after {self.timeout.total}s")
        return TransportError(str(error) or error.__class__.__name__)
