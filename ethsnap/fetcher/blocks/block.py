from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ethsnap.fetcher.utils import hex_to_int


@dataclass(frozen=True)
class Block:
    """
    Ethereum block data, as shown on the dashboard
    """

    #: Block number
    number: int
    #: Block hash
    hash: str
    #: Block timestamp, UNIX seconds
    timestamp: int
    #: Transaction hashes, in block order
    transactions: Tuple[str, ...] = field(default_factory=tuple)
    #: Gas used, decimal string
    gas_used: str = "0"
    #: Gas limit, decimal string
    gas_limit: str = "0"
    #: Fee recipient address
    miner: str = ""
    #: Difficulty, decimal string (``"0"`` after the merge)
    difficulty: str = "0"
    #: Number of transactions in the block
    tx_count: int = 0

    @staticmethod
    def from_rpc(raw: Dict[str, Any]) -> Block:
        """
        Create :class:`Block` from an ``eth_getBlockByNumber`` response.

        The transaction list may hold hashes or full transaction objects,
        only the hashes are kept.
        """
        txs = raw.get("transactions") or []
        hashes = tuple(tx if isinstance(tx, str) else tx["hash"] for tx in txs)
        return Block(
            number=hex_to_int(raw["number"]),
            hash=raw.get("hash") or "",
            timestamp=hex_to_int(raw["timestamp"]),
            transactions=hashes,
            gas_used=str(hex_to_int(raw.get("gasUsed"))),
            gas_limit=str(hex_to_int(raw.get("gasLimit"))),
            miner=raw.get("miner") or "",
            difficulty=str(hex_to_int(raw.get("difficulty"))),
            tx_count=len(txs),
        )

    @staticmethod
    def from_dict(dct: Dict[str, Any]) -> Block:
        """
        Create :class:`Block` from dict
        """
        return Block(
            number=dct["number"],
            hash=dct["hash"],
            timestamp=dct["timestamp"],
            transactions=tuple(dct["transactions"]),
            gas_used=dct["gasUsed"],
            gas_limit=dct["gasLimit"],
            miner=dct["miner"],
            difficulty=dct["difficulty"],
            tx_count=dct["txCount"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert :class:`Block` to dict
        """
        return {
            "number": self.number,
            "hash": self.hash,
            "timestamp": self.timestamp,
            "transactions": list(self.transactions),
            "gasUsed": self.gas_used,
            "gasLimit": self.gas_limit,
            "miner": self.miner,
            "difficulty": self.difficulty,
            "txCount": self.tx_count,
        }

    def __repr__(self):
        return f"Block({json.dumps(self.to_dict())})"
