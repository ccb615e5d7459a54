"""
Server-sent events feed.

Each event carries a JSON object tagged with its ``type``:

    * ``initial`` - sent once on connect, ``data`` is the full snapshot;
    * ``block`` - sent after every successful refresh, ``data`` holds
      the current block, its transactions, network info, mempool stats
      and ``lastUpdate``.

Idle connections get a ``: keep-alive`` comment line so proxies don't
drop them.
"""

import json
from typing import Any, Dict, Iterator

from ethsnap.snapshot.cache import SnapshotCache
from ethsnap.snapshot.models import Snapshot

KEEPALIVE_SECONDS = 15.0
KEEPALIVE = ": keep-alive\n\n"


def format_event(kind: str, data: Dict[str, Any]) -> str:
    return f"data: {json.dumps({'type': kind, 'data': data})}\n\n"


def block_payload(snapshot: Snapshot) -> Dict[str, Any]:
    full = snapshot.to_dict()
    return {
        key: full[key]
        for key in ("block", "transactions", "networkInfo", "mempoolStats", "lastUpdate")
    }


def snapshot_events(
    cache: SnapshotCache, keepalive: float = KEEPALIVE_SECONDS
) -> Iterator[str]:
    """
    Endless stream of SSE frames for one client.

    Args:
        cache: cache to follow
        keepalive: seconds of silence before a keep-alive comment
    """
    snapshot, version = cache.read_versioned()
    yield format_event("initial", snapshot.to_dict())
    while True:
        snapshot, current = cache.wait_for_update(version, keepalive)
        if current == version:
            yield KEEPALIVE
            continue
        version = current
        yield format_event("block", block_payload(snapshot))
