"""Read-only traversal helpers over a cell tree."""

from typing import Iterator

from storyboard.cells.composite import Cell, Column, Row
from storyboard.cells.leaf import Leaf


def iter_post_order(cell: Cell) -> Iterator[Cell]:
    """Yield every cell of the tree, children before their parent."""
    match cell:
        case Leaf():
            yield cell
        case Row() | Column():
            for child in cell.children:
                yield from iter_post_order(child)
            yield cell


def count_cells(cell: Cell) -> int:
    return sum(1 for _ in iter_post_order(cell))


def tree_depth(cell: Cell) -> int:
    """Depth in levels; a lone leaf (or empty composite) has depth 1."""
    match cell:
        case Leaf():
            return 1
        case Row() | Column():
            return 1 + max((tree_depth(child) for child in cell.children), default=0)
