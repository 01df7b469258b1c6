"""Storyboard entry point: render the root cell and fit it to an output width."""

import logging
from typing import Optional

from storyboard.cells import Column, Row
from storyboard.config import DEFAULT_CONFIG, RenderConfig
from storyboard.errors import InvalidArgumentError
from storyboard.imaging.ops import ImageOps, PillowImageOps
from storyboard.renderer.scale import scale_to_dimension
from storyboard.renderer.tree import render
from storyboard.types import Axis, Extent, RasterImage

DEFAULT_WIDTH = 1000

logger = logging.getLogger(__name__)


def _check_width(width_constraint: object) -> Extent:
    if (
        isinstance(width_constraint, bool)
        or not isinstance(width_constraint, int)
        or width_constraint <= 0
    ):
        raise InvalidArgumentError(
            f"Width constraint must be a positive integer, got {width_constraint!r}"
        )
    return width_constraint


def render_storyboard(
    root: Row | Column,
    width_constraint: Extent,
    config: Optional[RenderConfig] = None,
    ops: Optional[ImageOps] = None,
    reuse_cache: bool = True,
) -> RasterImage:
    """Render the tree under ``root`` and rescale it to ``width_constraint``.

    Args:
        root: Root composite, normally a ``Row``.
        width_constraint: Exact width of the returned image.
        config: Canvas/resampling settings, used when ``ops`` is not given.
        ops: Image operations backend; overrides ``config``.
        reuse_cache: Honor composites rendered by an earlier call. When False
            all caches in the tree are cleared first.

    Returns:
        A new image ``width_constraint`` pixels wide; height follows the root
        image's aspect ratio (truncated).

    Raises:
        InvalidArgumentError: If ``width_constraint`` is not a positive integer.
        EmptyInputError, MissingImageError, InvalidDimensionError: From rendering.
    """
    width = _check_width(width_constraint)
    if ops is None:
        ops = PillowImageOps(config or DEFAULT_CONFIG)
    if not reuse_cache:
        root.clear_cache(recursive=True)

    root_image = render(root, ops)
    logger.debug(
        "root rendered at %dx%d, fitting to width %d",
        ops.width(root_image),
        ops.height(root_image),
        width,
    )
    return scale_to_dimension(root_image, Axis.HORIZONTAL, width, ops)


class StoryboardRenderer:
    width: Extent
    config: RenderConfig
    ops: ImageOps

    def __init__(
        self,
        width: Extent = DEFAULT_WIDTH,
        config: Optional[RenderConfig] = None,
        ops: Optional[ImageOps] = None,
    ):
        self.width = _check_width(width)
        self.config = config or DEFAULT_CONFIG
        self.ops = ops or PillowImageOps(self.config)

    def render(self, root: Row | Column, reuse_cache: bool = True) -> RasterImage:
        return render_storyboard(
            root, self.width, ops=self.ops, reuse_cache=reuse_cache
        )
