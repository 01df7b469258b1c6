import pytest
from typing import List, Tuple

import numpy as np

from storyboard.errors import EmptyInputError, InvalidDimensionError, MissingImageError
from storyboard.renderer.merge import layout_offsets, merge_along_axis, reference_extent
from storyboard.types import Axis
from tests.test_utils import (
    BLUE,
    GREEN,
    RED,
    RecordingOps,
    make_image,
    pixels,
)


def test_column_scenario_downscales_to_narrowest() -> None:
    """
    (100,50), (80,80), (60,40) stacked vertically: reference width 60, the
    first two are downscaled to 60x30 and 60x60, the third is left as is.
    """
    ops = RecordingOps()
    images = [make_image(100, 50), make_image(80, 80), make_image(60, 40)]

    merged = merge_along_axis(images, Axis.VERTICAL, ops)

    assert merged.size == (60, 130)
    assert ops.draws == [((60, 30), 0, 0), ((60, 60), 0, 30), ((60, 40), 0, 90)]
    assert ops.draws[2][0] == images[2].size


def test_row_offsets_are_cumulative_and_top_aligned() -> None:
    ops = RecordingOps()
    images = [make_image(40, 20), make_image(30, 40), make_image(10, 20)]

    merged = merge_along_axis(images, Axis.HORIZONTAL, ops)

    # 30x40 -> 15x20
    assert merged.size == (65, 20)
    assert ops.draws == [((40, 20), 0, 0), ((15, 20), 40, 0), ((10, 20), 55, 0)]


@pytest.mark.parametrize("axis", [Axis.HORIZONTAL, Axis.VERTICAL])
@pytest.mark.parametrize(
    "sizes",
    [
        [(10, 10)],
        [(100, 50), (80, 80), (60, 40)],
        [(17, 93), (250, 31), (64, 64), (9, 400)],
        [(5, 5), (5, 5), (5, 5)],
    ],
)
def test_merge_extents(axis: Axis, sizes: List[Tuple[int, int]]) -> None:
    ops = RecordingOps()
    images = [make_image(w, h) for w, h in sizes]

    merged = merge_along_axis(images, axis, ops)

    if axis is Axis.HORIZONTAL:
        assert merged.height == min(h for _, h in sizes)
        assert merged.width == sum(size[0] for size, _, _ in ops.draws)
        assert all(size[1] == merged.height for size, _, _ in ops.draws)
    else:
        assert merged.width == min(w for w, _ in sizes)
        assert merged.height == sum(size[1] for size, _, _ in ops.draws)
        assert all(size[0] == merged.width for size, _, _ in ops.draws)


def test_no_image_is_enlarged() -> None:
    ops = RecordingOps()
    images = [make_image(12, 90), make_image(50, 30), make_image(7, 31)]
    merge_along_axis(images, Axis.HORIZONTAL, ops)
    for (drawn, _, _), source in zip(ops.draws, images):
        assert drawn[0] <= source.width
        assert drawn[1] <= source.height


def test_merge_places_images_in_input_order() -> None:
    images = [make_image(10, 10, RED), make_image(10, 10, GREEN), make_image(10, 10, BLUE)]

    merged = pixels(merge_along_axis(images, Axis.HORIZONTAL))

    assert merged.shape == (10, 30, 3)
    assert (merged[:, 0:10] == RED).all()
    assert (merged[:, 10:20] == GREEN).all()
    assert (merged[:, 20:30] == BLUE).all()


def test_merge_does_not_mutate_inputs() -> None:
    images = [make_image(100, 50, RED), make_image(20, 20, GREEN)]
    before = [pixels(image) for image in images]

    merged = merge_along_axis(images, Axis.VERTICAL)

    assert all(merged is not image for image in images)
    assert [image.size for image in images] == [(100, 50), (20, 20)]
    for image, original in zip(images, before):
        assert np.array_equal(pixels(image), original)


def test_empty_input_raises() -> None:
    with pytest.raises(EmptyInputError):
        merge_along_axis([], Axis.HORIZONTAL)


def test_missing_image_raises() -> None:
    with pytest.raises(MissingImageError, match="position 1"):
        merge_along_axis([make_image(5, 5), None], Axis.VERTICAL)


@pytest.mark.parametrize("axis", [Axis.HORIZONTAL, Axis.VERTICAL])
@pytest.mark.parametrize(
    "sizes",
    [
        [(5, 0), (5, 0)],
        [(0, 10), (5, 5)],
        [(0, 5), (5, 5)],
        [(5, 5), (7, 0)],
    ],
)
def test_zero_extent_input_raises(axis: Axis, sizes: List[Tuple[int, int]]) -> None:
    images = [make_image(w, h) for w, h in sizes]
    index = next(i for i, (w, h) in enumerate(sizes) if w == 0 or h == 0)
    with pytest.raises(InvalidDimensionError, match=f"position {index}"):
        merge_along_axis(images, axis)


def test_reference_extent_is_perpendicular_minimum() -> None:
    images = [make_image(100, 50), make_image(80, 80), make_image(60, 40)]
    assert reference_extent(images, Axis.VERTICAL) == 60
    assert reference_extent(images, Axis.HORIZONTAL) == 40


@pytest.mark.parametrize(
    "extents, axis, expected",
    [
        ([], Axis.HORIZONTAL, []),
        ([5], Axis.VERTICAL, [(0, 0)]),
        ([3, 4, 5], Axis.HORIZONTAL, [(0, 0), (3, 0), (7, 0)]),
        ([3, 4, 5], Axis.VERTICAL, [(0, 0), (0, 3), (0, 7)]),
    ],
)
def test_layout_offsets(
    extents: List[int], axis: Axis, expected: List[Tuple[int, int]]
) -> None:
    assert layout_offsets(extents, axis) == expected
