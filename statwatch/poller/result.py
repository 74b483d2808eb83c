"""
Poll Result - outcome of a single poll cycle
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..error_handler import ErrorType
from ..stats import StatsSnapshot


@dataclass
class PollResult:
    """Result of one fetch + parse + evaluate pass"""
    snapshot: Optional[StatsSnapshot] = None
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None
    response_time: float = 0.0
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None
