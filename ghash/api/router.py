from __future__ import annotations

from fastapi import APIRouter

from ghash.api.geohash import router as geohash_router
from ghash.api.health import router as health_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(geohash_router)
