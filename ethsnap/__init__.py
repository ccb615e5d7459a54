"""
ethsnap keeps a warm, in-memory snapshot of the Ethereum chain head
and serves it to dashboards.

The package is split into three layers:

+-----------------------------+----------------------------------------------+
| Module                      | Description                                  |
+=============================+==============================================+
| :mod:`ethsnap.fetcher`      | JSON-RPC access and decoding of node data    |
+-----------------------------+----------------------------------------------+
| :mod:`ethsnap.snapshot`     | Snapshot building, caching and refreshing    |
+-----------------------------+----------------------------------------------+
| :mod:`ethsnap.server`       | HTTP routes and the server-sent events feed  |
+-----------------------------+----------------------------------------------+
"""

__version__ = "0.1.0"
