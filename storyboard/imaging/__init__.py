"""Raster primitives and file I/O.

The composer core never touches Pillow directly; it goes through the
:class:`~storyboard.imaging.ops.ImageOps` protocol so the raster backend stays
swappable. :mod:`storyboard.imaging.io` loads and saves files for callers that
build trees from disk.
"""
