"""
Module for fetching the latest block from web3.

The main class of this module is :class:`BlocksService`.

Example:
    ::

        service = BlocksService.create(rpc="https://eth.llamarpc.com")
        number, raw = service.get_latest_block()
        block = Block.from_rpc(raw)
        # => Block({"number": 18000000, ...})
"""

from ethsnap.fetcher.blocks.block import Block
from ethsnap.fetcher.blocks.service import BlocksService
