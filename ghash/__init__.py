"""Geohash codec: encode/decode coordinates, cell bounds and rectangular ranges."""

from __future__ import annotations

from ghash.core.errors import (
    GeohashError,
    InvalidCoordinateError,
    InvalidDepthError,
    InvalidHashError,
)
from ghash.services.geohash_range import geohash_range, range_size
from ghash.utils.box import BoundingBox
from ghash.utils.geohash import bounds, decode, decode_center, encode

__all__ = [
    "BoundingBox",
    "GeohashError",
    "InvalidCoordinateError",
    "InvalidDepthError",
    "InvalidHashError",
    "bounds",
    "decode",
    "decode_center",
    "encode",
    "geohash_range",
    "range_size",
]
