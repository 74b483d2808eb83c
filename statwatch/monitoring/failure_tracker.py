"""
Failure Streak - consecutive failure counting with a once-per-streak notice
"""

from dataclasses import dataclass, replace
from typing import Tuple

from ..config import FAILURE_ALERT_THRESHOLD


@dataclass(frozen=True)
class PollerState:
    """Failure streak carried from one poll cycle to the next.

    consecutive_failures == 0 is healthy; below the alert threshold the
    poller is degraded; once notice_printed is set it is alerting and stays
    silent until a success starts a fresh streak.
    """
    consecutive_failures: int = 0
    notice_printed: bool = False

    @property
    def healthy(self) -> bool:
        return self.consecutive_failures == 0

    @property
    def alerting(self) -> bool:
        return self.notice_printed


def record_success(state: PollerState) -> PollerState:
    """A successful poll clears both the counter and the notice flag"""
    return PollerState()


def record_failure(state: PollerState,
                   threshold: int = FAILURE_ALERT_THRESHOLD) -> Tuple[PollerState, bool]:
    """Count a failed poll.

    Returns the new state and whether the unreachable notice should be
    printed now. It fires once, when the streak reaches the threshold.
    """
    failures = state.consecutive_failures + 1
    if failures >= threshold and not state.notice_printed:
        return replace(state, consecutive_failures=failures, notice_printed=True), True
    return replace(state, consecutive_failures=failures), False
