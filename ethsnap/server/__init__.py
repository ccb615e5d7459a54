"""
HTTP surface of ethsnap.

+--------------------------------+-------------------------------------------+
| Route                          | Description                               |
+================================+===========================================+
| ``GET /api/ethereum/snapshot`` | Full snapshot, refreshed inline if stale  |
+--------------------------------+-------------------------------------------+
| ``GET /api/ethereum/health``   | Status, last update and block number      |
+--------------------------------+-------------------------------------------+
| ``GET /api/ethereum/mempool``  | Mempool stats (mock data)                 |
+--------------------------------+-------------------------------------------+
| ``GET /api/ethereum/stream``   | Server-sent events, one per new snapshot  |
+--------------------------------+-------------------------------------------+
"""

from ethsnap.server.app import create_app
