from __future__ import annotations

"""Geohash encode/decode/bounds.

A geohash is built by halving the world box ``depth`` times, alternating
longitude and latitude (longitude first). Each halving contributes one bit,
most significant first; every 5 bits render as one base-32 symbol.

Precision levels (characters -> cell size at the equator):
- 1: ~5000km
- 3: ~156km
- 5: ~5km
- 7: ~150m
- 10: ~1m
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, overload

from ghash.core.errors import (
    GeohashError,
    InvalidCoordinateError,
    InvalidDepthError,
    InvalidHashError,
)
from ghash.utils.alphabet import BITS_PER_SYMBOL, SYMBOL_TO_VALUE
from ghash.utils.bitpack import pack, unpack
from ghash.utils.box import BoundingBox, narrow_by_bits, narrow_to_point

DEFAULT_DEPTH = 50
DEFAULT_PRECISION = 6

# Doubles carry ~17 significant digits; rounding further is a no-op.
_MAX_ROUNDING_PRECISION = 17


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_coordinates(latitude: float, longitude: float) -> None:
    for name, value, limit in (("latitude", latitude, 90.0), ("longitude", longitude, 180.0)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidCoordinateError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidCoordinateError(f"{name} must be finite, got {value}")
        if not -limit <= value <= limit:
            raise InvalidCoordinateError(
                f"{name} must be between {-limit:g} and {limit:g}, got {value}"
            )


def _check_depth(depth: int, *, binary: bool) -> None:
    if not _is_int(depth) or depth <= 0:
        raise InvalidDepthError(f"depth must be a positive integer, got {depth!r}")
    if not binary and depth % BITS_PER_SYMBOL:
        raise InvalidDepthError(
            f"depth must be a multiple of {BITS_PER_SYMBOL} for string output, got {depth}"
        )


def _check_precision(precision: int) -> None:
    if not _is_int(precision) or precision < 0:
        raise GeohashError(f"precision must be a non-negative integer, got {precision!r}")


def _normalize(geohash: str | int) -> str | None:
    """Return the lower-cased symbol string for ``geohash``, or None if malformed."""

    if _is_int(geohash):
        if geohash < 0:
            return None
        return pack(geohash)
    if not isinstance(geohash, str):
        raise InvalidHashError(f"geohash must be a string or integer, got {type(geohash).__name__}")
    geohash = geohash.lower()
    if not geohash or any(c not in SYMBOL_TO_VALUE for c in geohash):
        return None
    return geohash


def _bits(symbols: str) -> Iterator[int]:
    for c in symbols:
        cd = SYMBOL_TO_VALUE[c]
        for shift in range(BITS_PER_SYMBOL - 1, -1, -1):
            yield (cd >> shift) & 1


def round_coordinate(value: float, precision: int) -> float:
    """Round half away from zero on the shortest decimal form of ``value``.

    ``round_coordinate(22.5, 0) == 23.0`` whereas ``round(22.5)`` gives 22.
    """

    _check_precision(precision)
    if precision >= _MAX_ROUNDING_PRECISION:
        return value
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@overload
def encode(latitude: int) -> str: ...


@overload
def encode(
    latitude: float, longitude: float, *, depth: int = ..., binary: bool = ...
) -> str | int: ...


def encode(latitude, longitude=None, *, depth=DEFAULT_DEPTH, binary=False):
    """
    Encode a coordinate to a geohash string (or its packed integer).

    Called with a single integer, only groups it into base-32 symbols. The
    result always has at least one symbol, so ``encode(0) == "0"``.

    Example:
        >>> encode(-23.5505, -46.6333)
        '6gyf4bf8mk'
        >>> encode(228644876657266)
        '6gyf4bf8mk'
    """

    if longitude is None:
        if not _is_int(latitude) or latitude < 0:
            raise InvalidHashError(f"expected a non-negative integer, got {latitude!r}")
        return pack(latitude)

    _check_coordinates(latitude, longitude)
    _check_depth(depth, binary=binary)

    value = 0
    for bit, _box in narrow_to_point(latitude, longitude, depth):
        value = (value << 1) | bit

    if binary:
        return value
    return pack(value, depth // BITS_PER_SYMBOL)


def bounds(geohash: str | int) -> BoundingBox | None:
    """Bounding box of a geohash; integers are zero-padded to whole symbols."""

    symbols = _normalize(geohash)
    if symbols is None:
        return None
    return narrow_by_bits(_bits(symbols))


def decode_center(geohash: str | int) -> tuple[float, float] | None:
    box = bounds(geohash)
    if box is None:
        return None
    return box.center


def decode(
    geohash: str | int, *, precision: int = DEFAULT_PRECISION, binary: bool = False
) -> tuple[float, float] | int | None:
    """
    Decode a geohash to the (latitude, longitude) center of its cell.

    With ``binary=True`` returns the packed integer instead. Malformed input
    yields None; a negative precision raises regardless of the hash.
    """

    _check_precision(precision)
    symbols = _normalize(geohash)
    if symbols is None:
        return None
    if binary:
        return unpack(symbols)

    latitude, longitude = narrow_by_bits(_bits(symbols)).center
    return round_coordinate(latitude, precision), round_coordinate(longitude, precision)
