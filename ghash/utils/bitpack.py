from __future__ import annotations

from ghash.utils.alphabet import BASE32, BITS_PER_SYMBOL, SYMBOL_TO_VALUE

_MASK = (1 << BITS_PER_SYMBOL) - 1


def symbol_count(value: int) -> int:
    """Number of 5-bit groups needed to hold ``value`` (at least one)."""

    return max(1, -(-value.bit_length() // BITS_PER_SYMBOL))


def pack(value: int, length: int | None = None) -> str:
    """Group ``value`` into base-32 symbols, most significant group first.

    With ``length`` the result is left-padded with ``"0"`` symbols to exactly
    that many characters; otherwise the shortest form is returned.
    """

    if value < 0:
        raise ValueError(f"cannot pack a negative value: {value}")
    if length is None:
        length = symbol_count(value)
    elif value >> (length * BITS_PER_SYMBOL):
        raise ValueError(f"{value} does not fit in {length} symbols")

    out: list[str] = []
    for _ in range(length):
        out.append(BASE32[value & _MASK])
        value >>= BITS_PER_SYMBOL
    out.reverse()
    return "".join(out)


def unpack(geohash: str) -> int:
    """Inverse of ``pack``. Raises KeyError on a symbol outside the alphabet."""

    value = 0
    for c in geohash:
        value = (value << BITS_PER_SYMBOL) | SYMBOL_TO_VALUE[c]
    return value
