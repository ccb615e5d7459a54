"""
Implements :class:`Core` that is used in other modules.
"""

import os
import logging
from functools import cached_property
from typing import Any, Sequence
from web3 import Web3
from web3.types import RPCEndpoint

from ethsnap.fetcher.errors import RpcError

DEFAULT_RPC = "https://eth.llamarpc.com"
web3_cache = {}

logger = logging.getLogger(__name__)


class Core:
    """
    A base class for any class that wants to use an Ethereum RPC.

    The web3 instance is created on demand, so deriving from this class
    is cheap. If you already hold a :class:`web3.Web3` instance (or a
    test double), inject it with the ``w3`` argument and the rpc url is
    never looked at.

    **Caching**

    The web3 instance is cached by the rpc url key, so every service
    pointed at the same node shares one provider.

    **Raw requests**

    Services talk to the node through :meth:`rpc_call`, which sends a
    single JSON-RPC 2.0 request and hands back the ``result`` member
    untouched (hex strings stay hex strings). Decoding is left to the
    models, see :mod:`ethsnap.fetcher.utils`.

    Args:
        rpc: An https Ethereum RPC endpoint uri
        w3: an instance of web3 (overrides rpc)
    """

    #: An https Ethereum RPC endpoint uri.
    #: Can be ``None`` if :class:`web3.Web3` is injected directly.
    rpc: str | None

    def __init__(self, rpc: str | None = None, w3: Web3 | None = None):
        self.rpc = rpc
        self._w3 = w3

    @cached_property
    def w3(self) -> Web3:
        """
        :class:`web3.Web3` instance for working with Ethereum RPC
        """
        if not self._w3 is None:
            return self._w3

        if self.rpc is None:
            self.rpc = os.environ.get("WEB3_PROVIDER_URI", DEFAULT_RPC)

        if not self.rpc in web3_cache:
            web3_cache[self.rpc] = Web3(Web3.HTTPProvider(self.rpc))

        return web3_cache[self.rpc]

    def rpc_call(self, method: str, params: Sequence[Any] = ()) -> Any:
        """
        Send one JSON-RPC request to the node.

        There's no retry here and no timeout other than the transport
        default. Transport errors propagate to the caller.

        Args:
            method: JSON-RPC method, e.g. ``eth_blockNumber``
            params: positional params for the method

        Returns:
            The ``result`` member of the response, ``None`` if it's absent

        Raises:
            RpcError: the node answered with an ``error`` member
        """
        response = self.w3.provider.make_request(RPCEndpoint(method), list(params))
        if response.get("error") is not None:
            raise RpcError.from_response(method, response["error"])
        if not "result" in response:
            logger.warning("%s returned no result", method)
        return response.get("result")
