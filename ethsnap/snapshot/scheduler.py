from __future__ import annotations

import logging
import threading

from ethsnap.snapshot.cache import SnapshotCache

DEFAULT_INTERVAL = 15.0

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """
    Keeps the cache warm regardless of request traffic.

    Runs one refresh cycle right after :meth:`start` and then one every
    ``interval`` seconds (Ethereum block time is ~12s). Ticks that find a
    cycle already in flight are skipped.

    Args:
        cache: cache to refresh
        interval: seconds between cycles
    """

    def __init__(self, cache: SnapshotCache, interval: float = DEFAULT_INTERVAL):
        self._cache = cache
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop, name="snapshot-refresh", daemon=True
        )
        self._thread.start()
        logger.info("Refreshing snapshot every %ss", self.interval)

    def stop(self, timeout: float | None = None):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _loop(self):
        while not self._stop.is_set():
            self._cache.refresh(blocking=False)
            self._stop.wait(self.interval)
