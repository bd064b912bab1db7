from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ghash.core.errors import APIError
from ghash.core.settings import Settings, get_settings
from ghash.services.geohash_range import geohash_range, range_size
from ghash.utils.geohash import bounds, decode, encode


router = APIRouter(prefix="/v1/geohash", tags=["geohash"])


logger = logging.getLogger(__name__)


class EncodeResponse(BaseModel):
    geohash: str | None = None
    value: int | None = None


class DecodeResponse(BaseModel):
    latitude: float
    longitude: float


class BoundsResponse(BaseModel):
    sw: tuple[float, float]
    ne: tuple[float, float]


class RangeResponse(BaseModel):
    count: int
    items: list[str]


def _malformed(geohash: str) -> APIError:
    return APIError(
        code="GEOHASH_MALFORMED",
        message="geohash must be a non-empty string of base-32 geohash symbols",
        status_code=400,
        details={"geohash": geohash},
    )


def _too_long(value: str, settings: Settings) -> bool:
    return len(value) > settings.max_hash_length


@router.get("/encode", response_model=EncodeResponse, response_model_exclude_none=True)
def encode_point(
    *,
    lat: float = Query(..., description="WGS84 latitude"),
    lon: float = Query(..., description="WGS84 longitude"),
    depth: int | None = Query(default=None, description="Number of interleaved bits"),
    binary: bool = Query(default=False, description="Return the packed integer"),
    settings: Settings = Depends(get_settings),
) -> EncodeResponse:
    if depth is None:
        depth = settings.default_depth
    if depth > settings.max_depth:
        raise APIError(
            code="GEOHASH_INVALID_DEPTH",
            message="depth exceeds the configured maximum",
            status_code=422,
            details={"depth": depth, "limit": settings.max_depth},
        )
    result = encode(lat, lon, depth=depth, binary=binary)
    if binary:
        return EncodeResponse(value=result)
    return EncodeResponse(geohash=result)


@router.get("/decode", response_model=DecodeResponse)
def decode_hash(
    *,
    geohash: str = Query(...),
    precision: int | None = Query(default=None, ge=0, description="Decimal digits"),
    settings: Settings = Depends(get_settings),
) -> DecodeResponse:
    if precision is None:
        precision = settings.default_precision
    if _too_long(geohash, settings):
        raise _malformed(geohash)
    point = decode(geohash, precision=precision)
    if point is None:
        raise _malformed(geohash)
    return DecodeResponse(latitude=point[0], longitude=point[1])


@router.get("/bounds", response_model=BoundsResponse)
def bounds_of_hash(
    *,
    geohash: str = Query(...),
    settings: Settings = Depends(get_settings),
) -> BoundsResponse:
    box = None if _too_long(geohash, settings) else bounds(geohash)
    if box is None:
        raise _malformed(geohash)
    return BoundsResponse(sw=box.sw, ne=box.ne)


@router.get("/range", response_model=RangeResponse)
def range_of_hashes(
    *,
    from_hash: str | None = Query(default=None, alias="from"),
    to_hash: str | None = Query(default=None, alias="to"),
    span: str | None = Query(default=None, description='Shorthand "prefix-suffix"'),
    settings: Settings = Depends(get_settings),
) -> RangeResponse:
    if span is not None and (from_hash is not None or to_hash is not None):
        raise APIError(
            code="GEOHASH_RANGE_INVALID",
            message="use either span or from/to, not both",
            status_code=400,
        )
    if span is not None:
        args: tuple[str, str | None] = (span, None)
    elif from_hash is not None and to_hash is not None:
        args = (from_hash, to_hash)
    else:
        raise APIError(
            code="GEOHASH_RANGE_INVALID",
            message="from and to are required",
            status_code=400,
        )

    corner = args[0].split("-", 1)[0] if args[1] is None else args[0]
    if _too_long(corner, settings):
        raise APIError(
            code="GEOHASH_RANGE_INVALID",
            message="corner geohash exceeds the configured maximum length",
            status_code=400,
            details={"length": len(corner), "limit": settings.max_hash_length},
        )

    size = range_size(*args)
    if size is None:
        raise APIError(
            code="GEOHASH_RANGE_INVALID",
            message="corners must be equal-length geohashes",
            status_code=400,
            details={"from": args[0], "to": args[1]},
        )
    if size > settings.range_max_cells:
        logger.info("Refusing geohash range of %d cells (limit %d)", size, settings.range_max_cells)
        raise APIError(
            code="GEOHASH_RANGE_TOO_LARGE",
            message="range holds too many cells",
            status_code=422,
            details={"count": size, "limit": settings.range_max_cells},
        )

    cells = geohash_range(*args) or set()
    return RangeResponse(count=len(cells), items=sorted(cells))
