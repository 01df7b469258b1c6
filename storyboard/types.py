"""Common type aliases and enumerations.

``Axis`` is the direction a composite stitches its children along; ``CellKind``
is the explicit tag carried by every node of the cell tree.
"""

from enum import StrEnum, auto
from typing import Tuple

from PIL import Image

Extent = int
Offset = Tuple[int, int]
RasterImage = Image.Image


class Axis(StrEnum):
    """Merge direction. ``HORIZONTAL`` stacks left to right, ``VERTICAL`` top to bottom."""

    HORIZONTAL = auto()
    VERTICAL = auto()

    @property
    def perpendicular(self) -> "Axis":
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


class CellKind(StrEnum):
    """Tag of a cell tree node."""

    LEAF = auto()
    ROW = auto()
    COLUMN = auto()
