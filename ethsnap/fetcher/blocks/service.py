from __future__ import annotations

from typing import Any, Dict, Tuple

from ethsnap.fetcher.core import Core
from ethsnap.fetcher.utils import hex_to_int


class BlocksService(Core):
    """
    Service for fetching the chain head.

    **Request/Response flow**

    ::

                +---------------+                    +-------+
                | BlocksService |                    | Node  |
                +---------------+                    +-------+
        -----------------  |                            |
        | Request block  |-|                            |
        |----------------| |                            |
                           |                            |
                           | eth_blockNumber            |
                           |--------------------------->|
                           |                            |
                           | eth_getBlockByNumber(N)    |
                           |--------------------------->|
              -----------  |                            |
              | Response |-|                            |
              |----------| |                            |
                           |                            |

    The block is fetched by the height returned from ``eth_blockNumber``
    rather than by the ``latest`` tag, so the number and the contents
    always describe the same block.

    Args:
        kwargs: Args for the :class:`ethsnap.fetcher.core.Core`
    """

    @staticmethod
    def create(**kwargs) -> BlocksService:
        """
        Create an instance of :class:`BlocksService`

        Args:
            kwargs: Args for the :class:`ethsnap.fetcher.core.Core`

        Returns:
            An instance of :class:`BlocksService`
        """
        return BlocksService(**kwargs)

    def get_latest_block_number(self) -> int:
        """
        Latest block number known to the node
        """
        return hex_to_int(self.rpc_call("eth_blockNumber"))

    def get_raw_block(
        self, number: int, full_transactions: bool = True
    ) -> Dict[str, Any] | None:
        """
        Get a block by number.

        Args:
            number: block number
            full_transactions: embed full transaction objects instead of hashes

        Returns:
            Raw block object, ``None`` if the node doesn't have it
        """
        return self.rpc_call("eth_getBlockByNumber", [hex(number), full_transactions])

    def get_latest_block(self) -> Tuple[int, Dict[str, Any] | None]:
        """
        Resolve the latest height and fetch that block with full transactions.

        Returns:
            A tuple of block number and the raw block (``None`` if missing)
        """
        number = self.get_latest_block_number()
        return number, self.get_raw_block(number)
