"""
Threshold Evaluator - pure checks of a snapshot against fixed limits
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from .parser import trim_trailing_zeros
from .snapshot import StatsSnapshot

MIB = 1024 * 1024
MIBIT = 1024 * 1024
DECIMAL_MEGA = 1000 * 1000


class PercentRounding(Enum):
    """How the memory usage percentage is rendered"""
    NEAREST = "nearest"   # half rounds up: 84.5% -> 85%
    FLOOR = "floor"       # integer truncation: 84.9% -> 84%


class BandwidthUnit(Enum):
    """How free bandwidth (bytes/s) is converted for the network warning"""
    MEBIBIT = "mebibit"                    # free * 8 / 2**20
    DECIMAL_MEGABYTE = "decimal_megabyte"  # free / 10**6


@dataclass(frozen=True)
class Thresholds:
    """Warning thresholds. Every check is a strict greater-than."""
    load_average: float = 30.0
    memory_percent: int = 80
    disk_percent: int = 90
    network_percent: int = 90
    memory_rounding: PercentRounding = PercentRounding.NEAREST
    bandwidth_unit: BandwidthUnit = BandwidthUnit.MEBIBIT


DEFAULT_THRESHOLDS = Thresholds()


def exceeds(used: int, total: int, percent: int) -> bool:
    """used/total > percent/100, in exact integer arithmetic. False when total is 0."""
    if total <= 0:
        return False
    return used * 100 > total * percent


def usage_percent(used: int, total: int, rounding: PercentRounding) -> int:
    if rounding is PercentRounding.FLOOR:
        return used * 100 // total
    return (used * 200 + total) // (total * 2)


def free_megabits(free_bytes_per_sec: int, unit: BandwidthUnit) -> int:
    if unit is BandwidthUnit.DECIMAL_MEGABYTE:
        return free_bytes_per_sec // DECIMAL_MEGA
    return free_bytes_per_sec * 8 // MIBIT


def check_load(snapshot: StatsSnapshot, thresholds: Thresholds):
    if snapshot.load_average > thresholds.load_average:
        return f"Load Average is too high: {trim_trailing_zeros(snapshot.load_average_text)}"
    return None


def check_memory(snapshot: StatsSnapshot, thresholds: Thresholds):
    if exceeds(snapshot.used_memory, snapshot.total_memory, thresholds.memory_percent):
        percent = usage_percent(snapshot.used_memory, snapshot.total_memory, thresholds.memory_rounding)
        return f"Memory usage too high: {percent}%"
    return None


def check_disk(snapshot: StatsSnapshot, thresholds: Thresholds):
    if exceeds(snapshot.used_disk, snapshot.total_disk, thresholds.disk_percent):
        free_mb = max(snapshot.total_disk - snapshot.used_disk, 0) // MIB
        return f"Free disk space is too low: {free_mb} Mb left"
    return None


def check_network(snapshot: StatsSnapshot, thresholds: Thresholds):
    if exceeds(snapshot.network_used, snapshot.network_capacity, thresholds.network_percent):
        free = max(snapshot.network_capacity - snapshot.network_used, 0)
        return f"Network bandwidth usage high: {free_megabits(free, thresholds.bandwidth_unit)} Mbit/s available"
    return None


CHECKS = (check_load, check_memory, check_disk, check_network)


def evaluate(snapshot: StatsSnapshot, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> List[str]:
    """Return the warning lines for a snapshot, in load, memory, disk, network order"""
    warnings = []
    for check in CHECKS:
        message = check(snapshot, thresholds)
        if message is not None:
            warnings.append(message)
    return warnings
