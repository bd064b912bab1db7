from __future__ import annotations

import itertools
import logging

import pytest

from ghash.services.geohash_range import geohash_range, range_size
from ghash.utils.alphabet import BASE32
from ghash.utils.box import BoundingBox
from ghash.utils.geohash import bounds


EXPECTED_6U4_6GX = {"6u" + c for c in "45hjnp"} | {"6g" + c for c in "defgstuvwxyz"}


@pytest.fixture(scope="module")
def boxes_of_length_3() -> dict[str, BoundingBox]:
    return {
        "".join(p): bounds("".join(p)) for p in itertools.product(BASE32, repeat=3)
    }


def test_range_between_two_corners() -> None:
    cells = geohash_range("6u4", "6gx")
    assert cells == EXPECTED_6U4_6GX
    assert len(cells) == 18
    assert {"6u4", "6gx", "6gf"} <= cells


def test_prefix_suffix_shorthand() -> None:
    assert geohash_range("6u4-gx") == geohash_range("6u4", "6gx")
    assert geohash_range("6u4-x") == geohash_range("6u4", "6ux")


def test_length_mismatch_yields_none() -> None:
    assert geohash_range("7p9", "pn") is None
    assert range_size("7p9", "pn") is None


@pytest.mark.parametrize(
    "args",
    [
        ("", ""),
        ("6a4", "6gx"),
        ("6u4", "6g!"),
        ("6u4",),
        ("6u4-gx-1",),
        ("6u-gx4",),
        ("-gx",),
        ("6u4-",),
    ],
)
def test_malformed_input_yields_none(args: tuple[str, ...]) -> None:
    assert geohash_range(*args) is None
    assert range_size(*args) is None


def test_single_cell_range() -> None:
    assert geohash_range("6u4", "6u4") == {"6u4"}
    assert range_size("6u4", "6u4") == 1


def test_whole_world_at_length_one() -> None:
    assert geohash_range("0", "z") == set(BASE32)
    assert range_size("0", "z") == 32


def test_corner_order_does_not_matter() -> None:
    # North-west/south-east, either order, and south-west/north-east.
    assert geohash_range("6gx", "6u4") == EXPECTED_6U4_6GX
    assert geohash_range("6gd", "6up") == EXPECTED_6U4_6GX
    assert geohash_range("6up", "6gd") == EXPECTED_6U4_6GX


def test_input_is_case_insensitive() -> None:
    assert geohash_range("6U4", "6GX") == EXPECTED_6U4_6GX
    assert geohash_range("6U4-GX") == EXPECTED_6U4_6GX


def test_range_size_counts_without_enumerating() -> None:
    assert range_size("6u4", "6gx") == 18
    assert range_size("6u4-gx") == 18


@pytest.mark.parametrize(
    "from_hash, to_hash",
    [
        ("6u4", "6gx"),
        ("9q8", "dr5"),
        ("s00", "kzz"),
        ("bpb", "00p"),
        ("u4p", "u4p"),
    ],
)
def test_range_is_exactly_the_cells_inside_the_corner_rectangle(
    boxes_of_length_3: dict[str, BoundingBox], from_hash: str, to_hash: str
) -> None:
    a = bounds(from_hash)
    b = bounds(to_hash)
    rect = BoundingBox(
        min(a.lat_min, b.lat_min),
        max(a.lat_max, b.lat_max),
        min(a.lon_min, b.lon_min),
        max(a.lon_max, b.lon_max),
    )
    inside = {h for h, box in boxes_of_length_3.items() if box.within(rect)}

    cells = geohash_range(from_hash, to_hash)
    assert cells == inside
    assert range_size(from_hash, to_hash) == len(inside)


def test_range_logs_cell_count(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="ghash.services.geohash_range"):
        geohash_range("6u4", "6gx")
    assert "cells=18" in caplog.text


def test_long_corner_hashes_do_not_exhaust_the_stack() -> None:
    corner = "0" * 1500
    assert geohash_range(corner, corner) == {corner}
    assert range_size(corner, corner) == 1

    cells = geohash_range("0" * 1499 + "0", "0" * 1499 + "3")
    assert cells == {"0" * 1499 + c for c in "0123"}
