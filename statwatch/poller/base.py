"""
Stats Poller - the poll, evaluate, report, sleep loop
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from .fetcher import StatsFetcher
from .result import PollResult
from ..config import PollerConfig
from ..error_handler import StatsPollError
from ..monitoring import ConsoleReporter, PollMetrics, PollerState, record_failure, record_success
from ..stats import Thresholds, evaluate, parse_stats_line

logger = logging.getLogger(__name__)


class StatsPoller:
    """
    Single-task poller. One ClientSession is opened for the poller's
    lifetime and reused by every cycle. The failure streak is threaded
    through each cycle as an explicit PollerState value.
    """

    def __init__(self, config: Optional[PollerConfig] = None,
                 thresholds: Optional[Thresholds] = None,
                 reporter: Optional[ConsoleReporter] = None):
        self.config = config or PollerConfig()
        self.thresholds = thresholds or Thresholds()
        self.reporter = reporter or ConsoleReporter()
        self.metrics = PollMetrics()
        self.state = PollerState()
        self._stop_event: Optional[asyncio.Event] = None
        self._stop_requested = False

    def stop(self):
        """Ask the loop to finish after the current cycle"""
        self._stop_requested = True
        if self._stop_event is not None:
            self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_requested

    async def run(self, max_cycles: Optional[int] = None) -> PollMetrics:
        """Poll until stop() is called or max_cycles cycles have run"""
        self._stop_event = asyncio.Event()
        if self._stop_requested:
            self._stop_event.set()

        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            fetcher = StatsFetcher(session, self.config.url, self.config.timeout_seconds)
            logger.info(f"Polling {self.config.url} every {self.config.interval_ms} ms")

            cycles = 0
            while not self._stop_event.is_set():
                result = await self.poll_once(fetcher)
                self.state = self.handle_result(self.state, result)
                cycles += 1

                if max_cycles is not None and cycles >= max_cycles:
                    break

                await self._sleep(self.config.interval_seconds)

        logger.info(f"Poller stopped: {self.metrics.summary()}")
        return self.metrics

    async def poll_once(self, fetcher: StatsFetcher) -> PollResult:
        """Fetch, parse and evaluate once. Poll errors are captured, not raised."""
        try:
            body = await fetcher.fetch()
            snapshot = parse_stats_line(body)
        except StatsPollError as e:
            logger.debug(f"Poll failed: {e.error_type.value} - {e} (status {fetcher.last_status})")
            return PollResult(
                error=str(e),
                error_type=e.error_type,
                response_time=fetcher.last_response_time,
                status_code=fetcher.last_status
            )

        return PollResult(
            snapshot=snapshot,
            warnings=evaluate(snapshot, self.thresholds),
            response_time=fetcher.last_response_time,
            status_code=fetcher.last_status
        )

    def handle_result(self, state: PollerState, result: PollResult) -> PollerState:
        """Report a cycle's outcome and return the next streak state"""
        if result.ok:
            logger.debug(f"Poll ok: status {result.status_code}, {result.snapshot}")
            emitted = self.reporter.report_warnings(result.warnings)
            self.metrics.record_success(result.response_time, emitted)
            if not state.healthy:
                logger.info(f"Stats endpoint recovered after {state.consecutive_failures} failed polls")
            return record_success(state)

        self.metrics.record_failure(result.error_type)
        state, notify = record_failure(state, self.config.failure_alert_threshold)
        if notify:
            self.reporter.report_unreachable()
            self.metrics.notices_emitted += 1
            logger.warning(f"{state.consecutive_failures} consecutive polls failed, last error: {result.error}")
        return state

    async def _sleep(self, seconds: float):
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            pass
