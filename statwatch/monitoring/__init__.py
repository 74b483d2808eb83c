"""
Monitoring and observability modules
"""

from .failure_tracker import PollerState, record_success, record_failure
from .reporter import ConsoleReporter, UNREACHABLE_NOTICE
from .poll_metrics import PollMetrics
from .log_manager import LogManager

__all__ = [
    'PollerState',
    'record_success',
    'record_failure',
    'ConsoleReporter',
    'UNREACHABLE_NOTICE',
    'PollMetrics',
    'LogManager'
]
