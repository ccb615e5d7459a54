"""
Snapshot module builds the dashboard view of the chain head and keeps
it cached in memory.

Example:
    ::

        builder = SnapshotBuilder.create(rpc="https://eth.llamarpc.com")
        cache = SnapshotCache(builder)
        RefreshScheduler(cache, interval=15).start()

        cache.ensure_fresh(30_000)
        cache.read().to_dict()
        # => {"block": {...}, "transactions": [...], ...}
"""

from ethsnap.snapshot.models import (
    GasPricePoint,
    MempoolStats,
    NetworkInfo,
    Snapshot,
    SnapshotUpdate,
)
from ethsnap.snapshot.builder import SnapshotBuilder
from ethsnap.snapshot.cache import SnapshotCache
from ethsnap.snapshot.scheduler import RefreshScheduler
