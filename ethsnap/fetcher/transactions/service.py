from __future__ import annotations

import logging
from typing import Any, Dict, List

from ethsnap.fetcher.core import Core
from ethsnap.fetcher.transactions.transaction import Transaction

DEFAULT_TX_LIMIT = 15

logger = logging.getLogger(__name__)


class TransactionsService(Core):
    """
    Service for fetching transaction details.

    A block usually carries a couple of hundred transactions. The
    dashboard only lists the first few, so :meth:`sample_transactions`
    takes the first ``limit`` entries of a block and resolves them one
    by one.

    **Failure isolation**

    Every entry is fetched and normalized on its own. When one of them
    fails (node error, malformed object) it's logged and skipped; the
    rest of the sample is still returned.

    Args:
        kwargs: Args for the :class:`ethsnap.fetcher.core.Core`
    """

    @staticmethod
    def create(**kwargs) -> TransactionsService:
        """
        Create an instance of :class:`TransactionsService`

        Args:
            kwargs: Args for the :class:`ethsnap.fetcher.core.Core`

        Returns:
            An instance of :class:`TransactionsService`
        """
        return TransactionsService(**kwargs)

    def get_transaction(self, tx_hash: str) -> Dict[str, Any] | None:
        """
        Get transaction by hash.

        Args:
            tx_hash: transaction hash

        Returns:
            Raw transaction object, ``None`` if the node doesn't know it
        """
        return self.rpc_call("eth_getTransactionByHash", [tx_hash])

    def sample_transactions(
        self, raw_block: Dict[str, Any], limit: int = DEFAULT_TX_LIMIT
    ) -> List[Transaction]:
        """
        Resolve the first ``limit`` transactions of a block.

        Embedded transaction objects are used as is, bare hashes are
        fetched with :meth:`get_transaction`.

        Args:
            raw_block: raw block object from ``eth_getBlockByNumber``
            limit: max number of transactions to resolve

        Returns:
            Transactions in block order, without the ones that failed
        """
        out = []
        for entry in (raw_block.get("transactions") or [])[:limit]:
            try:
                raw = self.get_transaction(entry) if isinstance(entry, str) else entry
                if raw is None:
                    logger.warning("Transaction %s not found, skipping", entry)
                    continue
                out.append(Transaction.from_rpc(raw))
            except Exception:
                tx_hash = entry if isinstance(entry, str) else entry.get("hash")
                logger.warning("Error processing transaction %s", tx_hash, exc_info=True)
        return out
