from collections import Counter
from dataclasses import dataclass, field

from ..error_handler import ErrorType


@dataclass
class PollMetrics:
    """Running totals for the lifetime of a poller"""
    polls: int = 0
    successes: int = 0
    failures: int = 0
    warnings_emitted: int = 0
    notices_emitted: int = 0
    total_response_time: float = 0.0
    failures_by_type: Counter = field(default_factory=Counter)

    def record_success(self, response_time: float, warnings: int):
        self.polls += 1
        self.successes += 1
        self.warnings_emitted += warnings
        self.total_response_time += response_time

    def record_failure(self, error_type: ErrorType):
        self.polls += 1
        self.failures += 1
        self.failures_by_type[error_type.value] += 1

    @property
    def avg_response_time(self) -> float:
        if not self.successes:
            return 0.0
        return self.total_response_time / self.successes

    @property
    def success_rate(self) -> float:
        if not self.polls:
            return 0.0
        return self.successes / self.polls * 100

    def summary(self) -> str:
        text = (f"{self.polls} polls, {self.successes} ok, {self.failures} failed "
                f"({self.success_rate:.1f}% success), {self.warnings_emitted} warnings, "
                f"avg response {self.avg_response_time:.3f}s")
        if self.failures_by_type:
            breakdown = ", ".join(f"{k}={v}" for k, v in sorted(self.failures_by_type.items()))
            text += f" [{breakdown}]"
        return text
