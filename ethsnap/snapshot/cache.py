from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Tuple

from ethsnap.snapshot.builder import SnapshotBuilder
from ethsnap.snapshot.models import Snapshot, SnapshotUpdate

BLOCK_HISTORY_SIZE = 20
GAS_HISTORY_SIZE = 50

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class SnapshotCache:
    """
    Process-wide holder of the latest :class:`Snapshot`.

    There's one instance per process. It's created with zero-valued
    defaults and handed explicitly to the scheduler and to the HTTP app.

    **Triggers**

    Two independent triggers run refresh cycles: the background
    scheduler (:meth:`refresh`) and HTTP requests that find the snapshot
    too old (:meth:`ensure_fresh`). Both go through one refresh lock, so
    at most one cycle is in flight at any time:

        * the scheduler doesn't wait, if a cycle is running it skips
          its tick;
        * a request waits for the running cycle and then re-checks the
          age, so a burst of requests results in a single cycle.

    **Consistency**

    A cycle either produces a complete update, which is merged into a
    new :class:`Snapshot` and swapped in under the state lock, or fails
    and leaves the previous snapshot untouched. Readers never see a
    partial update and :meth:`read` never waits for network I/O.

    Args:
        builder: refresh cycle implementation
        block_history_size: max blocks kept in the block history
        gas_history_size: max samples kept in the gas price history
        clock: returns current UNIX time in milliseconds
    """

    _builder: SnapshotBuilder
    _snapshot: Snapshot
    _version: int

    def __init__(
        self,
        builder: SnapshotBuilder,
        block_history_size: int = BLOCK_HISTORY_SIZE,
        gas_history_size: int = GAS_HISTORY_SIZE,
        clock: Callable[[], int] = now_ms,
    ):
        self._builder = builder
        self.block_history_size = block_history_size
        self.gas_history_size = gas_history_size
        self._clock = clock
        self._snapshot = Snapshot.empty()
        self._version = 0
        self._refresh_lock = threading.Lock()
        self._state = threading.Condition()

    @property
    def version(self) -> int:
        """
        Incremented on every successful update
        """
        with self._state:
            return self._version

    def read(self) -> Snapshot:
        """
        Current snapshot, without touching the network
        """
        with self._state:
            return self._snapshot

    def read_versioned(self) -> Tuple[Snapshot, int]:
        """
        Current snapshot together with its version
        """
        with self._state:
            return self._snapshot, self._version

    def age_ms(self) -> int:
        """
        Milliseconds since the last successful update
        """
        return self._clock() - self.read().last_update

    def is_stale(self, max_age_ms: int) -> bool:
        return self.age_ms() > max_age_ms

    def apply(self, update: SnapshotUpdate) -> Snapshot:
        """
        Merge a refresh result into the cache and wake up waiters.

        Returns:
            The new snapshot
        """
        with self._state:
            self._snapshot = self._snapshot.merge(
                update,
                last_update=self._clock(),
                block_history_size=self.block_history_size,
                gas_history_size=self.gas_history_size,
            )
            self._version += 1
            self._state.notify_all()
            return self._snapshot

    def refresh(self, blocking: bool = True) -> bool:
        """
        Run one refresh cycle.

        Args:
            blocking: wait for a cycle that's already running. When
                ``False`` and a cycle is in flight, return right away.

        Returns:
            ``True`` if the snapshot was updated
        """
        if not self._refresh_lock.acquire(blocking=blocking):
            logger.debug("Refresh already running, skipping")
            return False
        try:
            return self._run_cycle()
        finally:
            self._refresh_lock.release()

    def ensure_fresh(self, max_age_ms: int) -> bool:
        """
        Refresh synchronously if the snapshot is older than ``max_age_ms``.

        Returns:
            ``True`` if this call updated the snapshot
        """
        if not self.is_stale(max_age_ms):
            return False
        with self._refresh_lock:
            # another trigger may have refreshed while we waited
            if not self.is_stale(max_age_ms):
                return False
            logger.info("Snapshot is %sms old, refreshing inline", self.age_ms())
            return self._run_cycle()

    def wait_for_update(self, version: int, timeout: float | None = None) -> Tuple[Snapshot, int]:
        """
        Block until the cache moves past ``version`` or ``timeout`` expires.

        Returns:
            Current snapshot and version (unchanged on timeout)
        """
        with self._state:
            self._state.wait_for(lambda: self._version != version, timeout)
            return self._snapshot, self._version

    def _run_cycle(self) -> bool:
        try:
            update = self._builder.build()
        except Exception:
            logger.exception("Error fetching Ethereum data")
            return False
        if update is None:
            return False

        self.apply(update)
        logger.info(
            "Updated Ethereum data - block %s, %s txs",
            update.network_info.block_number,
            len(update.transactions),
        )
        return True
