"""
Fetcher module reads chain data from an Ethereum JSON-RPC node and
normalizes it into plain python objects.

There are several services that do exactly this:

+-----------------------------------------------------------+---------------------------+
| Service                                                   | Description               |
+===========================================================+===========================+
| :class:`ethsnap.fetcher.blocks.BlocksService`             | Latest block and its data |
+-----------------------------------------------------------+---------------------------+
| :class:`ethsnap.fetcher.transactions.TransactionsService` | Transaction details       |
+-----------------------------------------------------------+---------------------------+
| :class:`ethsnap.fetcher.gas.GasService`                   | Current network gas price |
+-----------------------------------------------------------+---------------------------+

All of them derive from :class:`ethsnap.fetcher.core.Core` which owns
the web3 connection.
"""
