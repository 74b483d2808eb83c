from dataclasses import dataclass


@dataclass(frozen=True)
class StatsSnapshot:
    """One fully parsed statistics line"""
    load_average: float
    total_memory: int
    used_memory: int
    total_disk: int
    used_disk: int
    network_capacity: int  # bytes/s
    network_used: int      # bytes/s
    load_average_text: str = ""

    def __post_init__(self):
        if not self.load_average_text:
            object.__setattr__(self, "load_average_text", repr(self.load_average))
