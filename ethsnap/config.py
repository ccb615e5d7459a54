"""
Runtime configuration.

Every setting can come from the environment; command line flags
(see :mod:`ethsnap.server.cli`) override it.

+---------------------------+-----------------------------+--------------------+
| Variable                  | Meaning                     | Default            |
+===========================+=============================+====================+
| ``WEB3_PROVIDER_URI``     | Ethereum RPC endpoint       | public llamarpc    |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_POLL_INTERVAL`` | Seconds between refreshes   | 15                 |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_MAX_AGE_MS``    | Staleness threshold         | 30000              |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_TX_LIMIT``      | Transactions per snapshot   | 15                 |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_BLOCK_HISTORY`` | Blocks kept in history      | 20                 |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_GAS_HISTORY``   | Gas samples kept in history | 50                 |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_HOST``          | HTTP bind address           | 0.0.0.0            |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_PORT``          | HTTP port                   | 4000               |
+---------------------------+-----------------------------+--------------------+
| ``ETHSNAP_LOG_LEVEL``     | Logging level               | INFO               |
+---------------------------+-----------------------------+--------------------+
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from ethsnap.fetcher.core import DEFAULT_RPC

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Config:
    rpc: str = DEFAULT_RPC
    poll_interval: float = 15.0
    max_age_ms: int = 30_000
    tx_limit: int = 15
    block_history_size: int = 20
    gas_history_size: int = 50
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> Config:
        """
        Read :class:`Config` from environment variables

        Args:
            env: variables to read, ``os.environ`` if ``None``
        """
        env = os.environ if env is None else env
        default = Config()
        return Config(
            rpc=env.get("WEB3_PROVIDER_URI", default.rpc),
            poll_interval=float(env.get("ETHSNAP_POLL_INTERVAL", default.poll_interval)),
            max_age_ms=int(env.get("ETHSNAP_MAX_AGE_MS", default.max_age_ms)),
            tx_limit=int(env.get("ETHSNAP_TX_LIMIT", default.tx_limit)),
            block_history_size=int(
                env.get("ETHSNAP_BLOCK_HISTORY", default.block_history_size)
            ),
            gas_history_size=int(env.get("ETHSNAP_GAS_HISTORY", default.gas_history_size)),
            host=env.get("ETHSNAP_HOST", default.host),
            port=int(env.get("ETHSNAP_PORT", default.port)),
            log_level=env.get("ETHSNAP_LOG_LEVEL", default.log_level).upper(),
        )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)
