from __future__ import annotations

from ethsnap.fetcher.core import Core
from ethsnap.fetcher.utils import format_gwei


class GasService(Core):
    """
    Service for reading the current gas price suggested by the node.

    Args:
        kwargs: Args for the :class:`ethsnap.fetcher.core.Core`
    """

    @staticmethod
    def create(**kwargs) -> GasService:
        return GasService(**kwargs)

    def get_gas_price(self) -> str:
        """
        Current gas price

        Returns:
            Gas price in gwei, 2 decimals
        """
        return format_gwei(self.rpc_call("eth_gasPrice"))
