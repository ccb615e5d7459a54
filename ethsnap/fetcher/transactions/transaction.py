from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Dict

from ethsnap.fetcher.utils import format_ether, format_gwei, hex_to_int

#: Recipient shown for transactions that deploy a contract
CONTRACT_CREATION = "Contract Creation"


@dataclass(frozen=True)
class Transaction:
    """
    Ethereum transaction data, as shown on the dashboard
    """

    #: Transaction hash
    hash: str
    #: Sender address
    from_address: str
    #: Recipient address or :data:`CONTRACT_CREATION`
    to_address: str
    #: Value in ether, 6 decimals
    value: str
    #: Gas price in gwei, 2 decimals
    gas_price: str
    #: Gas limit, decimal string
    gas_limit: str
    #: Sender nonce
    nonce: int
    #: Containing block number (0 for pending)
    block_number: int

    @staticmethod
    def from_rpc(raw: Dict[str, Any]) -> Transaction:
        """
        Create :class:`Transaction` from an ``eth_getTransactionByHash``
        response (or a transaction object embedded in a block).
        """
        return Transaction(
            hash=raw["hash"],
            from_address=raw["from"],
            to_address=raw.get("to") or CONTRACT_CREATION,
            value=format_ether(raw["value"]),
            gas_price=format_gwei(raw.get("gasPrice")),
            gas_limit=str(hex_to_int(raw["gas"])),
            nonce=hex_to_int(raw["nonce"]),
            block_number=hex_to_int(raw.get("blockNumber")),
        )

    @property
    def is_contract_creation(self) -> bool:
        return self.to_address == CONTRACT_CREATION

    @staticmethod
    def from_dict(dct: Dict[str, Any]) -> Transaction:
        """
        Create :class:`Transaction` from dict
        """
        return Transaction(
            hash=dct["hash"],
            from_address=dct["from"],
            to_address=dct["to"],
            value=dct["value"],
            gas_price=dct["gasPrice"],
            gas_limit=dct["gasLimit"],
            nonce=dct["nonce"],
            block_number=dct["blockNumber"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert :class:`Transaction` to dict
        """
        return {
            "hash": self.hash,
            "from": self.from_address,
            "to": self.to_address,
            "value": self.value,
            "gasPrice": self.gas_price,
            "gasLimit": self.gas_limit,
            "nonce": self.nonce,
            "blockNumber": self.block_number,
        }

    def __repr__(self):
        return f"Transaction({json.dumps(self.to_dict())})"
