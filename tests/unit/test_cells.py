import dataclasses

import pytest

from storyboard.cells import (
    Column,
    Composite,
    Leaf,
    Row,
    count_cells,
    iter_post_order,
    tree_depth,
)
from storyboard.errors import CacheOverwriteError, InvalidDimensionError
from storyboard.types import Axis, CellKind
from tests.test_utils import make_image, make_leaf


def test_add_appends_in_order_and_chains() -> None:
    a, b, c = make_leaf(1, 1), make_leaf(2, 2), make_leaf(3, 3)
    row = Row()

    returned = row.add(a).add(b)
    row.extend([c])

    assert returned is row
    assert row.children == [a, b, c]


def test_composites_start_unrendered() -> None:
    for composite in (Row(), Column()):
        assert composite.children == []
        assert composite.cached_image is None
        assert not composite.is_rendered


def test_tags_and_axes() -> None:
    assert Leaf(make_image(1, 1)).kind is CellKind.LEAF
    assert Row.kind is CellKind.ROW and Row.axis is Axis.HORIZONTAL
    assert Column.kind is CellKind.COLUMN and Column.axis is Axis.VERTICAL
    assert isinstance(Row(), Composite) and isinstance(Column(), Composite)
    assert not isinstance(Leaf(make_image(1, 1)), Composite)


def test_leaf_is_immutable() -> None:
    leaf = make_leaf(4, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        leaf.image = make_image(2, 2)  # type: ignore[misc]


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (0, 0)])
def test_leaf_rejects_empty_image(size: tuple[int, int]) -> None:
    with pytest.raises(InvalidDimensionError, match=f"{size[0]}x{size[1]}"):
        Leaf(make_image(*size))


def test_leaf_rejects_missing_image() -> None:
    with pytest.raises(InvalidDimensionError):
        Leaf(None)  # type: ignore[arg-type]


def test_cache_is_write_once() -> None:
    row = Row().add(make_leaf(2, 2))
    first = make_image(2, 2)

    row.store_image(first)

    assert row.is_rendered
    with pytest.raises(CacheOverwriteError):
        row.store_image(make_image(2, 2))
    assert row.cached_image is first


def test_clear_cache_recursive() -> None:
    inner = Column().add(make_leaf(1, 1))
    outer = Row().add(inner)
    inner.store_image(make_image(1, 1))
    outer.store_image(make_image(1, 1))

    outer.clear_cache()
    assert not outer.is_rendered and inner.is_rendered

    outer.store_image(make_image(1, 1))
    outer.clear_cache(recursive=True)
    assert not outer.is_rendered and not inner.is_rendered


def test_post_order_visits_children_first() -> None:
    x, y, z = make_leaf(1, 1), make_leaf(1, 1), make_leaf(1, 1)
    inner = Column().add(x).add(y)
    root = Column().add(inner).add(z)

    order = list(iter_post_order(root))

    assert order == [x, y, inner, z, root]
    assert count_cells(root) == 5
    assert tree_depth(root) == 3


def test_depth_of_single_nodes() -> None:
    assert tree_depth(make_leaf(1, 1)) == 1
    assert tree_depth(Row()) == 1
    assert count_cells(Row()) == 1
