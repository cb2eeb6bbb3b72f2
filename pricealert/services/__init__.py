"""
Core application services: the price watcher, its scheduler and the status endpoint.
"""
from .watcher import PriceWatcher, WatcherState
from .scheduler import IntervalScheduler, seconds_until_next_run
from .status_server import StatusServer

__all__ = ["PriceWatcher", "WatcherState", "IntervalScheduler", "seconds_until_next_run", "StatusServer"]
