from __future__ import annotations

from ghash.utils.box import Axis, BoundingBox, narrow_by_bits, narrow_to_point


def test_world_box_and_corners() -> None:
    box = BoundingBox.world()
    assert box.sw == (-90.0, -180.0)
    assert box.ne == (90.0, 180.0)
    assert box.center == (0.0, 0.0)


def test_half_keeps_requested_side() -> None:
    box = BoundingBox.world()
    assert box.half(Axis.LON, upper=True) == BoundingBox(-90.0, 90.0, 0.0, 180.0)
    assert box.half(Axis.LON, upper=False) == BoundingBox(-90.0, 90.0, -180.0, 0.0)
    assert box.half(Axis.LAT, upper=True) == BoundingBox(0.0, 90.0, -180.0, 180.0)
    assert box.half(Axis.LAT, upper=False) == BoundingBox(-90.0, 0.0, -180.0, 180.0)


def test_axis_alternates_starting_with_longitude() -> None:
    # 1 on longitude, then 0 on latitude.
    assert narrow_by_bits([1, 0]) == BoundingBox(-90.0, 0.0, 0.0, 180.0)


def test_point_on_midpoint_takes_lower_half() -> None:
    bits = [bit for bit, _ in narrow_to_point(0.0, 0.0, 2)]
    assert bits == [0, 0]


def test_narrowing_never_widens_or_inverts() -> None:
    previous = BoundingBox.world()
    for _bit, box in narrow_to_point(48.8566, 2.3522, 40):
        assert box.lat_min <= box.lat_max
        assert box.lon_min <= box.lon_max
        assert box.within(previous)
        assert box.contains(48.8566, 2.3522)
        previous = box


def test_as_dict() -> None:
    assert BoundingBox(1.0, 2.0, 3.0, 4.0).as_dict() == {"sw": [1.0, 3.0], "ne": [2.0, 4.0]}
