from __future__ import annotations

import logging
import random

from ethsnap.fetcher.blocks import Block, BlocksService
from ethsnap.fetcher.gas import GasService
from ethsnap.fetcher.transactions import TransactionsService
from ethsnap.fetcher.transactions.service import DEFAULT_TX_LIMIT
from ethsnap.snapshot.mempool import simulate_mempool_stats
from ethsnap.snapshot.models import GasPricePoint, NetworkInfo, SnapshotUpdate

logger = logging.getLogger(__name__)


class SnapshotBuilder:
    """
    Fetches the chain head and assembles one :class:`SnapshotUpdate`.

    **Refresh cycle**

        1. Resolve the latest block number and fetch that block with
           full transaction objects.
        2. If the node returns no block, give up (``None``).
        3. Normalize the block.
        4. Resolve the first ``tx_limit`` transactions. A transaction
           that fails is skipped, the cycle goes on.
        5. Fetch the gas price (once per cycle).
        6. Make up mempool stats (mock data).

    The builder never touches the cache. Merging the update into the
    snapshot is :class:`ethsnap.snapshot.cache.SnapshotCache` business.

    Args:
        blocks: block service
        transactions: transaction service
        gas: gas price service
        tx_limit: max number of transactions to resolve per block
        rng: random generator for the mock mempool stats
    """

    _blocks: BlocksService
    _transactions: TransactionsService
    _gas: GasService
    tx_limit: int

    def __init__(
        self,
        blocks: BlocksService,
        transactions: TransactionsService,
        gas: GasService,
        tx_limit: int = DEFAULT_TX_LIMIT,
        rng: random.Random | None = None,
    ):
        self._blocks = blocks
        self._transactions = transactions
        self._gas = gas
        self.tx_limit = tx_limit
        self._rng = rng

    @staticmethod
    def create(tx_limit: int = DEFAULT_TX_LIMIT, **kwargs) -> SnapshotBuilder:
        """
        Create an instance of :class:`SnapshotBuilder` with services sharing one
        connection

        Args:
            tx_limit: max number of transactions to resolve per block
            kwargs: Args for the :class:`ethsnap.fetcher.core.Core`
        """
        return SnapshotBuilder(
            BlocksService.create(**kwargs),
            TransactionsService.create(**kwargs),
            GasService.create(**kwargs),
            tx_limit=tx_limit,
        )

    def build(self) -> SnapshotUpdate | None:
        """
        Run one refresh cycle against the node.

        Returns:
            The update, ``None`` if the node returned no block

        Raises:
            Any transport or :class:`ethsnap.fetcher.errors.RpcError` error
            outside the per-transaction loop
        """
        number, raw_block = self._blocks.get_latest_block()
        if not raw_block:
            logger.error("Failed to fetch block %s", number)
            return None

        block = Block.from_rpc(raw_block)
        transactions = self._transactions.sample_transactions(raw_block, self.tx_limit)
        gas_price = self._gas.get_gas_price()

        return SnapshotUpdate(
            block=block,
            transactions=tuple(transactions),
            network_info=NetworkInfo(
                block_number=number, gas_price=gas_price, tx_count=block.tx_count
            ),
            gas_price_point=GasPricePoint(
                block_number=number,
                gas_price=float(gas_price),
                timestamp=block.timestamp,
            ),
            mempool_stats=simulate_mempool_stats(gas_price, self._rng),
        )
