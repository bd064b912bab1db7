from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator


class Axis(enum.Enum):
    LON = "lon"
    LAT = "lat"

    def flip(self) -> Axis:
        return Axis.LAT if self is Axis.LON else Axis.LON


@dataclass(frozen=True, slots=True)
class BoundingBox:
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    @classmethod
    def world(cls) -> BoundingBox:
        return cls(-90.0, 90.0, -180.0, 180.0)

    @property
    def sw(self) -> tuple[float, float]:
        return (self.lat_min, self.lon_min)

    @property
    def ne(self) -> tuple[float, float]:
        return (self.lat_max, self.lon_max)

    @property
    def center(self) -> tuple[float, float]:
        return (self.lat_min + self.lat_max) / 2.0, (self.lon_min + self.lon_max) / 2.0

    def midpoint(self, axis: Axis) -> float:
        if axis is Axis.LON:
            return (self.lon_min + self.lon_max) / 2.0
        return (self.lat_min + self.lat_max) / 2.0

    def half(self, axis: Axis, upper: bool) -> BoundingBox:
        """Keep the upper or lower half of the box along ``axis``."""

        mid = self.midpoint(axis)
        if axis is Axis.LON:
            if upper:
                return BoundingBox(self.lat_min, self.lat_max, mid, self.lon_max)
            return BoundingBox(self.lat_min, self.lat_max, self.lon_min, mid)
        if upper:
            return BoundingBox(mid, self.lat_max, self.lon_min, self.lon_max)
        return BoundingBox(self.lat_min, mid, self.lon_min, self.lon_max)

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.lat_min <= latitude <= self.lat_max
            and self.lon_min <= longitude <= self.lon_max
        )

    def within(self, other: BoundingBox) -> bool:
        return (
            other.lat_min <= self.lat_min
            and self.lat_max <= other.lat_max
            and other.lon_min <= self.lon_min
            and self.lon_max <= other.lon_max
        )

    def as_dict(self) -> dict[str, list[float]]:
        return {"sw": list(self.sw), "ne": list(self.ne)}


def narrow_to_point(
    latitude: float, longitude: float, depth: int
) -> Iterator[tuple[int, BoundingBox]]:
    """Yield (bit, box) per step while narrowing the world box onto a point.

    The axis alternates every bit, starting with longitude. A coordinate
    strictly above the midpoint selects the upper half (bit 1).
    """

    box = BoundingBox.world()
    axis = Axis.LON
    for _ in range(depth):
        value = longitude if axis is Axis.LON else latitude
        bit = 1 if value > box.midpoint(axis) else 0
        box = box.half(axis, upper=bool(bit))
        yield bit, box
        axis = axis.flip()


def narrow_by_bits(bits: Iterable[int], box: BoundingBox | None = None) -> BoundingBox:
    """Replay ``bits`` (most significant first) onto ``box``, starting on longitude."""

    box = box or BoundingBox.world()
    axis = Axis.LON
    for bit in bits:
        box = box.half(axis, upper=bool(bit))
        axis = axis.flip()
    return box
