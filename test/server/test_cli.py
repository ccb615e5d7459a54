from ethsnap.config import Config
from ethsnap.server.cli import build_cache, parse_args
from ethsnap.snapshot.models import Snapshot


def test_parse_args_defaults_to_base():
    base = Config(rpc="http://node:8545", port=4100)
    assert parse_args([], base=base) == base


def test_parse_args_overrides():
    config = parse_args(
        [
            "--rpc",
            "http://other:8545",
            "--port",
            "5000",
            "--poll-interval",
            "5",
            "--max-age-ms",
            "10000",
            "--tx-limit",
            "3",
            "--log-level",
            "debug",
        ],
        base=Config(),
    )
    assert config.rpc == "http://other:8545"
    assert config.port == 5000
    assert config.poll_interval == 5.0
    assert config.max_age_ms == 10_000
    assert config.tx_limit == 3
    assert config.log_level == "DEBUG"


def test_build_cache():
    cache = build_cache(Config(tx_limit=5, block_history_size=10, gas_history_size=30))
    assert cache.block_history_size == 10
    assert cache.gas_history_size == 30
    assert cache.read() == Snapshot.empty()
