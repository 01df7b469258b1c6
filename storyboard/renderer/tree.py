"""Post-order tree renderer.

Two strategies are provided:

* :func:`render` memoizes into each composite's write-once ``cached_image``.
  Every composite child is rendered (whatever its tag, so a ``Column`` directly
  inside a ``Column`` is handled like any other nesting) before its parent reads
  the child's cache and merges.
* :func:`render_mapping` leaves the tree untouched and returns a persistent map
  from node identity to rendered image.
"""

import logging
from typing import Dict, List, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from storyboard.cells import Cell, Column, Composite, Leaf, Row, iter_post_order
from storyboard.imaging.ops import ImageOps, resolve_ops
from storyboard.renderer.merge import merge_along_axis
from storyboard.types import RasterImage

logger = logging.getLogger(__name__)

NodeID = int
RenderMap = PMap[NodeID, RasterImage]


def child_image(child: Cell) -> Optional[RasterImage]:
    """Image a parent reads for ``child``: a leaf's image or a composite's cache."""
    match child:
        case Leaf(image=image):
            return image
        case Row() | Column():
            return child.cached_image


def render_composite(composite: Composite, ops: Optional[ImageOps] = None) -> RasterImage:
    """
    Render all composite descendants of ``composite`` into their caches, then
    merge its children along its axis. Does not write ``composite``'s own cache.
    """
    ops = resolve_ops(ops)
    for child in composite.children:
        if isinstance(child, Composite):
            render(child, ops)

    images: List[Optional[RasterImage]] = [child_image(child) for child in composite.children]
    logger.debug("merging %s of %d children", composite.kind, len(images))
    return merge_along_axis(images, composite.axis, ops)


def render(cell: Cell, ops: Optional[ImageOps] = None) -> RasterImage:
    """Render ``cell`` to an image.

    Leaves return their image unchanged. A composite that is already rendered
    returns its cached image; otherwise it is rendered in post-order and the
    result is stored in its ``cached_image``.

    Raises:
        EmptyInputError: If a composite in the tree has no children.
        MissingImageError: If a child image is absent at merge time.
    """
    match cell:
        case Leaf(image=image):
            return image
        case Row() | Column():
            if cell.cached_image is not None:
                return cell.cached_image
            image = render_composite(cell, ops)
            cell.store_image(image)
            return image
    raise TypeError(f"Not a cell: {cell!r}")


def render_mapping(cell: Cell, ops: Optional[ImageOps] = None) -> RenderMap:
    """Render every node of the tree without touching any ``cached_image``.

    Returns:
        Persistent map from ``id(node)`` to that node's rendered image, for
        leaves and composites alike. A composite appearing several times in the
        tree is rendered once per appearance with identical results.
    """
    ops = resolve_ops(ops)
    rendered: Dict[NodeID, RasterImage] = {}
    for node in iter_post_order(cell):
        match node:
            case Leaf(image=image):
                rendered[id(node)] = image
            case Row() | Column():
                images = [rendered.get(id(child)) for child in node.children]
                rendered[id(node)] = merge_along_axis(images, node.axis, ops)
    return pmap(rendered)


def render_pure(cell: Cell, ops: Optional[ImageOps] = None) -> RasterImage:
    """Rendered image of ``cell`` computed via :func:`render_mapping`."""
    return render_mapping(cell, ops)[id(cell)]
