"""
Utility functions for decoding JSON-RPC quantities.

Nodes encode every quantity as a ``0x`` prefixed hex string. Python
integers have arbitrary precision, so block numbers, gas figures and
wei amounts all go through :func:`hex_to_int`. Wei amounts are then
converted with :class:`decimal.Decimal` arithmetic and rendered as
fixed-point strings (display only).
"""

from typing import Any
from eth_typing.encoding import HexStr
from eth_utils import from_wei, to_int

ETHER_DECIMALS = 6
GWEI_DECIMALS = 2


def hex_to_int(value: HexStr | int | None) -> int:
    """
    Decode a hex quantity.

    Args:
        value: ``0x`` prefixed hex string. ``None`` and ``"0x"`` decode to 0

    Returns:
        Decoded integer

    Examples:
        ::

            hex_to_int("0x10")
            # 16
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    if value in ("", "0x", "0X"):
        return 0
    return to_int(hexstr=value)


def format_ether(wei: HexStr | int | None) -> str:
    """
    Convert a wei amount to ether with 6 decimal digits.

    Examples:
        ::

            format_ether("0xde0b6b3a7640000")
            # 1.000000
    """
    return _format_unit(wei, "ether", ETHER_DECIMALS)


def format_gwei(wei: HexStr | int | None) -> str:
    """
    Convert a wei amount to gwei with 2 decimal digits.

    Examples:
        ::

            format_gwei("0x3b9aca00")
            # 1.00
    """
    return _format_unit(wei, "gwei", GWEI_DECIMALS)


def _format_unit(wei: Any, unit: str, decimals: int) -> str:
    amount = from_wei(hex_to_int(wei), unit)
    return f"{amount:.{decimals}f}"
