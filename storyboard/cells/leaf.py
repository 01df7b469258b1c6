"""Leaf cell: a single already-rendered image."""

from dataclasses import dataclass
from typing import ClassVar

from storyboard.errors import InvalidDimensionError
from storyboard.imaging.ops import DEFAULT_OPS
from storyboard.types import CellKind, RasterImage


@dataclass(frozen=True, eq=False)
class Leaf:
    """Immutable holder of a loaded image.

    Extents are validated through the default image operations, the same
    backend the renderer uses unless another one is injected.

    Attributes:
        image: Raster image with strictly positive width and height.
    """

    kind: ClassVar[CellKind] = CellKind.LEAF

    image: RasterImage

    def __post_init__(self) -> None:
        if self.image is None:
            raise InvalidDimensionError("Leaf requires an image")
        width, height = DEFAULT_OPS.width(self.image), DEFAULT_OPS.height(self.image)
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Leaf image must have positive extents, got {width}x{height}"
            )
