"""
``ethsnap`` command: wires the cache, the scheduler and the HTTP app
together and runs the server.
"""

from __future__ import annotations
import argparse
import dataclasses
import logging
from typing import List

from ethsnap.config import Config, configure_logging
from ethsnap.server.app import create_app
from ethsnap.snapshot import RefreshScheduler, SnapshotBuilder, SnapshotCache

logger = logging.getLogger(__name__)


def parse_args(argv: List[str] | None = None, base: Config | None = None) -> Config:
    base = base or Config.from_env()
    parser = argparse.ArgumentParser(
        prog="ethsnap", description="Serve a cached snapshot of the Ethereum chain head"
    )
    parser.add_argument("--rpc", default=base.rpc, help="Ethereum JSON-RPC endpoint")
    parser.add_argument("--host", default=base.host)
    parser.add_argument("--port", type=int, default=base.port)
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=base.poll_interval,
        help="seconds between background refreshes",
    )
    parser.add_argument(
        "--max-age-ms",
        type=int,
        default=base.max_age_ms,
        help="snapshot age that makes a request refresh inline",
    )
    parser.add_argument("--tx-limit", type=int, default=base.tx_limit)
    parser.add_argument("--log-level", default=base.log_level)
    args = parser.parse_args(argv)
    return dataclasses.replace(
        base,
        rpc=args.rpc,
        host=args.host,
        port=args.port,
        poll_interval=args.poll_interval,
        max_age_ms=args.max_age_ms,
        tx_limit=args.tx_limit,
        log_level=args.log_level.upper(),
    )


def build_cache(config: Config) -> SnapshotCache:
    builder = SnapshotBuilder.create(tx_limit=config.tx_limit, rpc=config.rpc)
    return SnapshotCache(
        builder,
        block_history_size=config.block_history_size,
        gas_history_size=config.gas_history_size,
    )


def main(argv: List[str] | None = None):
    config = parse_args(argv)
    configure_logging(config.log_level)

    cache = build_cache(config)
    scheduler = RefreshScheduler(cache, interval=config.poll_interval)
    scheduler.start()

    app = create_app(cache, config)
    logger.info("Serving on %s:%s, rpc %s", config.host, config.port, config.rpc)
    try:
        app.run(host=config.host, port=config.port, threaded=True)
    finally:
        scheduler.stop()


if __name__ == "__main__":
    main()
