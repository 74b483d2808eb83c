"""
Stats snapshot model, CSV line parser and threshold evaluator
"""

from .snapshot import StatsSnapshot
from .parser import parse_stats_line, trim_trailing_zeros
from .evaluator import Thresholds, PercentRounding, BandwidthUnit, evaluate

__all__ = [
    'StatsSnapshot',
    'parse_stats_line',
    'trim_trailing_zeros',
    'Thresholds',
    'PercentRounding',
    'BandwidthUnit',
    'evaluate'
]
