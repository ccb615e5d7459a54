"""
Module for fetching transaction details from web3.

The main class of this module is :class:`TransactionsService`.

Example:
    ::

        service = TransactionsService.create(rpc="https://eth.llamarpc.com")
        txs = service.sample_transactions(raw_block, limit=15)
        txs[0].to_address
        # => "0x7a25..." or "Contract Creation"
"""

from ethsnap.fetcher.transactions.transaction import Transaction, CONTRACT_CREATION
from ethsnap.fetcher.transactions.service import TransactionsService
