import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

STATS_URL = "http://srv.msk01.gigacorp.local/_stats"
REQUEST_TIMEOUT_SECONDS = 3.0
DEFAULT_POLL_INTERVAL_MS = 1000
FAILURE_ALERT_THRESHOLD = 3  # consecutive failed polls before the notice
DEFAULT_LOG_LEVEL = "WARNING"


def parse_interval_ms(raw: Optional[str]) -> int:
    """Parse POLL_INTERVAL_MS, falling back to the default on anything but a positive int"""
    if raw is None or raw == "":
        return DEFAULT_POLL_INTERVAL_MS

    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring unparsable POLL_INTERVAL_MS={raw!r}, using {DEFAULT_POLL_INTERVAL_MS} ms")
        return DEFAULT_POLL_INTERVAL_MS

    if value <= 0:
        logger.warning(f"Ignoring non-positive POLL_INTERVAL_MS={raw!r}, using {DEFAULT_POLL_INTERVAL_MS} ms")
        return DEFAULT_POLL_INTERVAL_MS

    return value


def parse_log_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass
class PollerConfig:
    """Runtime settings for the stats poller"""
    url: str = STATS_URL
    interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    failure_alert_threshold: int = FAILURE_ALERT_THRESHOLD
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[str] = None

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PollerConfig":
        """Build a config from environment variables (os.environ by default)"""
        if environ is None:
            environ = os.environ

        return cls(
            interval_ms=parse_interval_ms(environ.get("POLL_INTERVAL_MS")),
            log_level=parse_log_level(environ.get("LOG_LEVEL")),
            log_dir=environ.get("LOG_DIR") or None,
        )
