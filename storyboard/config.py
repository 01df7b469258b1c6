"""Rendering configuration.

``RenderConfig`` is an immutable value object passed to the Pillow image
operations. Derive variants with :func:`dataclasses.replace` or
:meth:`RenderConfig.with_resample` rather than mutating a shared instance.
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple, Union

from PIL import Image

from storyboard.errors import InvalidArgumentError

Color = Union[int, Tuple[int, ...]]

DEFAULT_MODE = "RGB"
# A single int is expanded by Pillow to every band of any mode.
DEFAULT_BACKGROUND: Color = 0
DEFAULT_RESAMPLE = Image.Resampling.LANCZOS

RESAMPLE_REGISTRY: Dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def resample_by_name(name: str) -> Image.Resampling:
    """Look up a Pillow resampling filter by its lowercase name."""
    try:
        return RESAMPLE_REGISTRY[name.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown resample filter {name!r}; expected one of {sorted(RESAMPLE_REGISTRY)}"
        ) from None


@dataclass(frozen=True)
class RenderConfig:
    """Canvas and resampling settings.

    Attributes:
        mode: Pillow mode of every allocated canvas; drawn images are converted to it.
        background: Fill color of a fresh canvas, valid for ``mode``. Fully
            covered by a valid merge.
        resample: Filter used whenever an image is resized.
    """

    mode: str = DEFAULT_MODE
    background: Color = DEFAULT_BACKGROUND
    resample: Image.Resampling = DEFAULT_RESAMPLE

    def __post_init__(self) -> None:
        try:
            Image.new(self.mode, (1, 1), self.background)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Background {self.background!r} is not valid for mode {self.mode!r}: {exc}"
            ) from exc

    def with_resample(self, name: str) -> "RenderConfig":
        return replace(self, resample=resample_by_name(name))


DEFAULT_CONFIG = RenderConfig()
