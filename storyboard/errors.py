"""Error taxonomy.

Every error raised by the composer derives from :class:`StoryboardError`, itself
a ``ValueError``: all failures come from invalid in-memory input and are
fail-fast. Nothing is retried and no partial image is returned.
"""


class StoryboardError(ValueError):
    """Base class for composer failures."""


class EmptyInputError(StoryboardError):
    """A merge was invoked with zero images."""


class MissingImageError(StoryboardError):
    """An image was required at merge time but was absent."""


class InvalidDimensionError(StoryboardError):
    """An image extent is zero or negative, so no scale ratio exists."""


class InvalidArgumentError(StoryboardError):
    """A caller supplied argument (width constraint, scale target, name) is invalid."""


class CacheOverwriteError(StoryboardError):
    """A composite's rendered image was written a second time."""


class ImageLoadError(StoryboardError):
    """A file exists but could not be decoded as an image."""
