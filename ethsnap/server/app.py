from __future__ import annotations

from flask import Flask, Response, jsonify

from ethsnap.config import Config
from ethsnap.server.stream import snapshot_events
from ethsnap.snapshot.cache import SnapshotCache


def create_app(cache: SnapshotCache, config: Config | None = None) -> Flask:
    """
    Create the Flask app serving ``cache``.

    None of the routes ever answers with an error: before the first
    refresh completes they serve the zero-valued snapshot, and when the
    node is down they serve whatever was cached last.

    Args:
        cache: the process snapshot cache
        config: runtime config, only ``max_age_ms`` is used here
    """
    config = config or Config()
    app = Flask(__name__)

    @app.get("/api/ethereum/snapshot")
    def snapshot():
        cache.ensure_fresh(config.max_age_ms)
        return jsonify(cache.read().to_dict())

    @app.get("/api/ethereum/health")
    def health():
        current = cache.read()
        return jsonify(
            {
                "status": "ok",
                "lastUpdate": current.last_update,
                "blockNumber": current.network_info.block_number,
            }
        )

    @app.get("/api/ethereum/mempool")
    def mempool():
        return jsonify(cache.read().mempool_stats.to_dict())

    @app.get("/api/ethereum/stream")
    def stream():
        return Response(
            snapshot_events(cache),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )

    return app
