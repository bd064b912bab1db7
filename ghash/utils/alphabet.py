from __future__ import annotations

"""Geohash base-32 alphabet.

Digits 0-9 followed by the lowercase letters minus a, i, l and o. The symbol
at index ``v`` renders the 5-bit value ``v``.
"""

from types import MappingProxyType

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

BITS_PER_SYMBOL = 5

SYMBOL_TO_VALUE = MappingProxyType({c: i for i, c in enumerate(BASE32)})


def symbol_value(symbol: str) -> int | None:
    """Return the 5-bit value of ``symbol``, or None if it is not in the alphabet."""

    return SYMBOL_TO_VALUE.get(symbol)


def value_symbol(value: int) -> str:
    if not 0 <= value < len(BASE32):
        raise IndexError(f"symbol value out of range: {value}")
    return BASE32[value]


def is_valid(geohash: str) -> bool:
    return bool(geohash) and all(c in SYMBOL_TO_VALUE for c in geohash)
