"""Single-dimension proportional resize."""

import logging
from typing import Optional

from storyboard.errors import InvalidArgumentError, InvalidDimensionError
from storyboard.imaging.ops import ImageOps, resolve_ops
from storyboard.types import Axis, Extent, RasterImage

logger = logging.getLogger(__name__)


def extent_along(image: RasterImage, axis: Axis, ops: Optional[ImageOps] = None) -> Extent:
    """Width for ``HORIZONTAL``, height for ``VERTICAL``."""
    ops = resolve_ops(ops)
    return ops.width(image) if axis is Axis.HORIZONTAL else ops.height(image)


def scaled_size(
    width: Extent, height: Extent, axis: Axis, target_extent: Extent
) -> tuple[Extent, Extent]:
    """
    Return ``(width, height)`` after scaling so the ``axis`` extent equals
    ``target_extent``. The other extent keeps the aspect ratio, is truncated and
    is at least 1.
    """
    if target_extent <= 0:
        raise InvalidArgumentError(f"Target extent must be positive, got {target_extent}")
    along, other = (width, height) if axis is Axis.HORIZONTAL else (height, width)
    if along <= 0 or other <= 0:
        raise InvalidDimensionError(
            f"Cannot scale a {width}x{height} image along {axis}"
        )
    # Never collapse to an empty image.
    new_other = max(1, int(other * (target_extent / along)))
    if axis is Axis.HORIZONTAL:
        return target_extent, new_other
    return new_other, target_extent


def scale_to_dimension(
    image: RasterImage,
    axis: Axis,
    target_extent: Extent,
    ops: Optional[ImageOps] = None,
) -> RasterImage:
    """Resize ``image`` so its ``axis`` extent is exactly ``target_extent``.

    Args:
        image: Source image; never mutated.
        axis: ``HORIZONTAL`` to target the width, ``VERTICAL`` for the height.
        target_extent: Positive size along ``axis``.
        ops: Image operations backend; Pillow by default.

    Returns:
        A new image with the other extent scaled proportionally (truncated).

    Raises:
        InvalidDimensionError: If the source extent along ``axis`` is zero.
        InvalidArgumentError: If ``target_extent`` is not positive.
    """
    ops = resolve_ops(ops)
    width, height = ops.width(image), ops.height(image)
    new_width, new_height = scaled_size(width, height, axis, target_extent)
    logger.debug("scale %dx%d -> %dx%d", width, height, new_width, new_height)
    return ops.resize(image, new_width, new_height)


def scale_to_width(
    image: RasterImage, width: Extent, ops: Optional[ImageOps] = None
) -> RasterImage:
    return scale_to_dimension(image, Axis.HORIZONTAL, width, ops)


def scale_to_height(
    image: RasterImage, height: Extent, ops: Optional[ImageOps] = None
) -> RasterImage:
    return scale_to_dimension(image, Axis.VERTICAL, height, ops)
