"""
Process entry point: logging, signal wiring and the event loop
"""

import os
import asyncio
import signal
import logging
from typing import Optional

from .config import PollerConfig, parse_log_level
from .monitoring import LogManager
from .poller import StatsPoller

logger = logging.getLogger(__name__)


def install_signal_handlers(poller: StatsPoller):
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, poller.stop)
        except (NotImplementedError, RuntimeError):
            # Windows event loops have no add_signal_handler; Ctrl+C still
            # surfaces as KeyboardInterrupt in main()
            logger.debug(f"Signal handler for {sig.name} not installed")


async def serve(config: PollerConfig, max_cycles: Optional[int] = None):
    poller = StatsPoller(config)
    install_signal_handlers(poller)
    return await poller.run(max_cycles=max_cycles)


def main() -> int:
    # before from_env(), which logs interval fallbacks
    log_manager = LogManager(log_level=parse_log_level(os.environ.get("LOG_LEVEL")),
                             log_dir=os.environ.get("LOG_DIR") or None)
    config = PollerConfig.from_env()

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    finally:
        log_manager.close()
    return 0
