"""Row and column composites.

Both share :class:`Composite`: an append-only ordered ``children`` list and a
``cached_image`` slot holding the rendered subtree. The slot is write-once;
:meth:`Composite.clear_cache` is the only way to reset it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, List, Optional, Self, Union

from storyboard.cells.leaf import Leaf
from storyboard.errors import CacheOverwriteError
from storyboard.types import Axis, CellKind, RasterImage


@dataclass(eq=False)
class Composite:
    """Container of child cells merged along ``axis``.

    Attributes:
        children: Ordered child cells. May be empty while authoring; the merger
            rejects an empty composite at render time.
        cached_image: Rendered image of this subtree, ``None`` until rendered.
    """

    kind: ClassVar[CellKind]
    axis: ClassVar[Axis]

    children: List[Cell] = field(default_factory=list)
    cached_image: Optional[RasterImage] = field(default=None, repr=False)

    def add(self, child: Cell) -> Self:
        """Append ``child`` and return ``self`` for chaining."""
        self.children.append(child)
        return self

    def extend(self, children: Iterable[Cell]) -> Self:
        for child in children:
            self.add(child)
        return self

    @property
    def is_rendered(self) -> bool:
        return self.cached_image is not None

    def store_image(self, image: RasterImage) -> None:
        """Set ``cached_image`` once; a second write raises ``CacheOverwriteError``."""
        if self.cached_image is not None:
            raise CacheOverwriteError(
                f"{type(self).__name__} at {id(self):#x} is already rendered"
            )
        self.cached_image = image

    def clear_cache(self, recursive: bool = False) -> None:
        self.cached_image = None
        if recursive:
            for child in self.children:
                if isinstance(child, Composite):
                    child.clear_cache(recursive=True)


@dataclass(eq=False)
class Row(Composite):
    """Children placed left to right, normalized to a common height."""

    kind: ClassVar[CellKind] = CellKind.ROW
    axis: ClassVar[Axis] = Axis.HORIZONTAL


@dataclass(eq=False)
class Column(Composite):
    """Children placed top to bottom, normalized to a common width."""

    kind: ClassVar[CellKind] = CellKind.COLUMN
    axis: ClassVar[Axis] = Axis.VERTICAL


Cell = Union[Leaf, Row, Column]
