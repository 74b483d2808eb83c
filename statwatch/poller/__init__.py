"""
Poller - fetch, parse, evaluate and report on a fixed cadence
"""

from .base import StatsPoller
from .fetcher import StatsFetcher
from .result import PollResult

__all__ = ['StatsPoller', 'StatsFetcher', 'PollResult']
