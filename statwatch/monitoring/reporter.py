import sys
from typing import Iterable, Optional, TextIO

UNREACHABLE_NOTICE = "Unable to fetch server statistic."


class ConsoleReporter:
    """Writes operator-facing lines to stdout, one per line, as they happen"""

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out

    @property
    def out(self) -> TextIO:
        # looked up per call, sys.stdout may be replaced at runtime
        return self._out if self._out is not None else sys.stdout

    def report_warnings(self, warnings: Iterable[str]) -> int:
        count = 0
        for line in warnings:
            print(line, file=self.out, flush=True)
            count += 1
        return count

    def report_unreachable(self):
        print(UNREACHABLE_NOTICE, file=self.out, flush=True)
