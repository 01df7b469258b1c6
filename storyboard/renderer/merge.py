"""Axis merger.

Stitches an ordered sequence of images into one along an axis. All inputs are
first normalized to the smallest perpendicular extent (height for a horizontal
merge, width for a vertical one); larger images are downscaled, nothing is
enlarged. Images are then drawn edge to edge in input order, top/left aligned.
"""

import logging
from itertools import accumulate
from typing import List, Optional, Sequence

from storyboard.errors import EmptyInputError, InvalidDimensionError, MissingImageError
from storyboard.imaging.ops import ImageOps, resolve_ops
from storyboard.renderer.scale import extent_along, scale_to_dimension
from storyboard.types import Axis, Extent, Offset, RasterImage

logger = logging.getLogger(__name__)


def _check_inputs(
    images: Sequence[Optional[RasterImage]], ops: ImageOps
) -> List[RasterImage]:
    if not images:
        raise EmptyInputError("Cannot merge an empty sequence of images")
    checked: List[RasterImage] = []
    for index, image in enumerate(images):
        if image is None:
            raise MissingImageError(f"Image at position {index} is missing")
        width, height = ops.width(image), ops.height(image)
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Image at position {index} has non-positive extents {width}x{height}"
            )
        checked.append(image)
    return checked


def _min_perpendicular(images: Sequence[RasterImage], axis: Axis, ops: ImageOps) -> Extent:
    return min(extent_along(image, axis.perpendicular, ops) for image in images)


def reference_extent(
    images: Sequence[Optional[RasterImage]],
    axis: Axis,
    ops: Optional[ImageOps] = None,
) -> Extent:
    """Minimum perpendicular extent across ``images``."""
    ops = resolve_ops(ops)
    return _min_perpendicular(_check_inputs(images, ops), axis, ops)


def layout_offsets(extents: Sequence[Extent], axis: Axis) -> List[Offset]:
    """
    Top-left offsets for images of the given along-axis ``extents``: cumulative
    sums starting at 0, perpendicular offset always 0.
    """
    starts = [0, *accumulate(extents)][: len(extents)]
    if axis is Axis.HORIZONTAL:
        return [(start, 0) for start in starts]
    return [(0, start) for start in starts]


def normalize(
    images: Sequence[RasterImage],
    axis: Axis,
    reference: Extent,
    ops: Optional[ImageOps] = None,
) -> List[RasterImage]:
    """Downscale every image whose perpendicular extent exceeds ``reference``."""
    ops = resolve_ops(ops)
    perpendicular = axis.perpendicular
    return [
        scale_to_dimension(image, perpendicular, reference, ops)
        if extent_along(image, perpendicular, ops) > reference
        else image
        for image in images
    ]


def merge_along_axis(
    images: Sequence[Optional[RasterImage]],
    axis: Axis,
    ops: Optional[ImageOps] = None,
) -> RasterImage:
    """Merge ``images`` into a single new image along ``axis``.

    Args:
        images: Ordered, non-empty sequence; inputs are never mutated.
        axis: ``HORIZONTAL`` (row) or ``VERTICAL`` (column).
        ops: Image operations backend; Pillow by default.

    Returns:
        A canvas whose perpendicular extent is the minimum perpendicular extent of
        the inputs and whose along-axis extent is the sum of the normalized inputs.

    Raises:
        EmptyInputError: If ``images`` is empty.
        MissingImageError: If any entry is ``None``.
        InvalidDimensionError: If any entry has a zero width or height.
    """
    ops = resolve_ops(ops)
    checked = _check_inputs(images, ops)
    reference = _min_perpendicular(checked, axis, ops)
    scaled = normalize(checked, axis, reference, ops)

    extents = [extent_along(image, axis, ops) for image in scaled]
    total = sum(extents)
    if axis is Axis.HORIZONTAL:
        canvas = ops.allocate_canvas(total, reference)
    else:
        canvas = ops.allocate_canvas(reference, total)

    for image, (x, y) in zip(scaled, layout_offsets(extents, axis)):
        ops.draw_at(canvas, image, x, y)

    logger.debug(
        "merged %d images along %s into %dx%d",
        len(scaled),
        axis,
        ops.width(canvas),
        ops.height(canvas),
    )
    return canvas
