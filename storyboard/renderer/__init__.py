"""Rendering subpackage.

Turns a cell tree into one flattened raster image:

* :mod:`~storyboard.renderer.scale` resizes an image to a target extent along
  one axis, preserving aspect ratio.
* :mod:`~storyboard.renderer.merge` normalizes a sequence of images to their
  smallest perpendicular extent and stitches them along an axis.
* :mod:`~storyboard.renderer.tree` walks the tree in post-order, merging every
  composite after all of its descendants.
* :mod:`~storyboard.renderer.storyboard` renders the root and rescales it to
  the requested output width.
"""
