from __future__ import annotations
from typing import Any, Dict


class RpcError(Exception):
    """
    Raised when the node answers a JSON-RPC request with an ``error`` member.

    Args:
        method: JSON-RPC method that failed
        code: error code reported by the node
        message: error message reported by the node
    """

    method: str
    code: int | None
    message: str

    def __init__(self, method: str, code: int | None, message: str):
        super().__init__(f"{method} failed with code {code}: {message}")
        self.method = method
        self.code = code
        self.message = message

    @staticmethod
    def from_response(method: str, error: Dict[str, Any] | Any) -> RpcError:
        """
        Create :class:`RpcError` from the ``error`` member of a response
        """
        if isinstance(error, dict):
            return RpcError(method, error.get("code"), str(error.get("message", "")))
        return RpcError(method, None, str(error))
