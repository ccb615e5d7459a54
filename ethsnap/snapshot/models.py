from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ethsnap.fetcher.blocks.block import Block
from ethsnap.fetcher.transactions.transaction import Transaction


@dataclass(frozen=True)
class NetworkInfo:
    """
    Chain head summary, recomputed on every refresh
    """

    #: Latest block number
    block_number: int = 0
    #: Current gas price in gwei, 2 decimals
    gas_price: str = "0"
    #: Transaction count of the latest block
    tx_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blockNumber": self.block_number,
            "gasPrice": self.gas_price,
            "txCount": self.tx_count,
        }


@dataclass(frozen=True)
class GasPricePoint:
    """
    One gas price sample, taken at a block
    """

    block_number: int
    #: Gas price in gwei
    gas_price: float
    #: Block timestamp, UNIX seconds
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blockNumber": self.block_number,
            "gasPrice": self.gas_price,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class MempoolStats:
    """
    Pending pool figures.

    Warning:
        These are synthetic, see :func:`ethsnap.snapshot.mempool.simulate_mempool_stats`.
    """

    pending_count: int = 0
    avg_gas_price: str = "0"
    total_value: str = "0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pendingCount": self.pending_count,
            "avgGasPrice": self.avg_gas_price,
            "totalValue": self.total_value,
        }


@dataclass(frozen=True)
class SnapshotUpdate:
    """
    Result of one successful refresh cycle, before it's merged into the cache
    """

    block: Block
    transactions: Tuple[Transaction, ...]
    network_info: NetworkInfo
    gas_price_point: GasPricePoint
    mempool_stats: MempoolStats


@dataclass(frozen=True)
class Snapshot:
    """
    Complete cached view served to clients.

    Histories are ordered newest first.
    """

    block: Block | None = None
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)
    network_info: NetworkInfo = field(default_factory=NetworkInfo)
    block_history: Tuple[Block, ...] = field(default_factory=tuple)
    gas_price_history: Tuple[GasPricePoint, ...] = field(default_factory=tuple)
    mempool_stats: MempoolStats = field(default_factory=MempoolStats)
    #: UNIX milliseconds of the last successful refresh, 0 if never
    last_update: int = 0

    @staticmethod
    def empty() -> Snapshot:
        """
        Zero-valued snapshot served until the first refresh completes
        """
        return Snapshot()

    def merge(
        self,
        update: SnapshotUpdate,
        last_update: int,
        block_history_size: int,
        gas_history_size: int,
    ) -> Snapshot:
        """
        Build the next snapshot from a refresh result.

        The new block and gas sample are prepended to the histories,
        which are then trimmed to their sizes. Entries at or above the
        new height (same block polled twice, or a reorg) are replaced,
        so both histories stay strictly ordered by block number.
        """
        number = update.block.number
        blocks = tuple(b for b in self.block_history if b.number < number)
        points = tuple(p for p in self.gas_price_history if p.block_number < number)
        return Snapshot(
            block=update.block,
            transactions=tuple(update.transactions),
            network_info=update.network_info,
            block_history=((update.block,) + blocks)[:block_history_size],
            gas_price_history=((update.gas_price_point,) + points)[:gas_history_size],
            mempool_stats=update.mempool_stats,
            last_update=last_update,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "block": None if self.block is None else self.block.to_dict(),
            "transactions": [t.to_dict() for t in self.transactions],
            "networkInfo": self.network_info.to_dict(),
            "blockHistory": [b.to_dict() for b in self.block_history],
            "gasPriceHistory": [p.to_dict() for p in self.gas_price_history],
            "mempoolStats": self.mempool_stats.to_dict(),
            "lastUpdate": self.last_update,
        }
