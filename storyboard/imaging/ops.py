"""Image operations collaborator.

The renderer needs exactly five primitives: two extent queries, canvas
allocation, an opaque blit and a resize. ``resize`` does not enforce aspect
ratio; the scaler computes matching dimensions beforehand.
"""

from typing import Optional, Protocol

from PIL import Image

from storyboard.config import DEFAULT_CONFIG, RenderConfig
from storyboard.types import Extent, RasterImage


class ImageOps(Protocol):
    def width(self, image: RasterImage) -> Extent: ...

    def height(self, image: RasterImage) -> Extent: ...

    def allocate_canvas(self, width: Extent, height: Extent) -> RasterImage: ...

    def draw_at(
        self, canvas: RasterImage, image: RasterImage, x: int, y: int
    ) -> None: ...

    def resize(self, image: RasterImage, width: Extent, height: Extent) -> RasterImage: ...


class PillowImageOps:
    """Pillow backed :class:`ImageOps`."""

    config: RenderConfig

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def width(self, image: RasterImage) -> Extent:
        return image.width

    def height(self, image: RasterImage) -> Extent:
        return image.height

    def allocate_canvas(self, width: Extent, height: Extent) -> RasterImage:
        return Image.new(self.config.mode, (width, height), self.config.background)

    def draw_at(self, canvas: RasterImage, image: RasterImage, x: int, y: int) -> None:
        """
        Overwrite the canvas region at (x, y) with ``image``. No blending: the
        image is converted to the canvas mode and pasted without a mask.
        """
        if image.mode != canvas.mode:
            image = image.convert(canvas.mode)
        canvas.paste(image, (x, y))

    def resize(self, image: RasterImage, width: Extent, height: Extent) -> RasterImage:
        return image.resize((width, height), resample=self.config.resample)


DEFAULT_OPS = PillowImageOps()


def resolve_ops(ops: Optional[ImageOps]) -> ImageOps:
    return ops if ops is not None else DEFAULT_OPS
