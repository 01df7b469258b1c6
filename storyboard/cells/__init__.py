"""Cell tree aggregates.

A storyboard is described by a tree of *cells*. A :class:`Leaf` holds one
concrete image; a :class:`Row` or :class:`Column` holds an ordered list of child
cells stitched horizontally or vertically. Composites are built by chained
``add`` calls and then handed to :mod:`storyboard.renderer`, which fills each
composite's write-once ``cached_image`` in post-order.
"""

from .leaf import Leaf
from .composite import Cell, Column, Composite, Row
from .walk import count_cells, iter_post_order, tree_depth

__all__ = [
    "Cell",
    "Column",
    "Composite",
    "Leaf",
    "Row",
    "count_cells",
    "iter_post_order",
    "tree_depth",
]
