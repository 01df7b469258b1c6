"""Loading images from disk into leaves and persisting rendered storyboards."""

from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from storyboard.cells import Leaf
from storyboard.errors import ImageLoadError, InvalidArgumentError
from storyboard.types import RasterImage

# Formats that cannot store an alpha channel.
_OPAQUE_FORMATS = {"JPEG", "BMP"}


def load_image(path: str | Path, mode: Optional[str] = None) -> RasterImage:
    """Read an image file fully into memory.

    Args:
        path: Image file path.
        mode: Optional Pillow mode to convert to (e.g. ``"RGB"``).

    Returns:
        A detached ``PIL.Image.Image``; the file handle is closed.

    Raises:
        FileNotFoundError: If ``path`` does not point to a file.
        ImageLoadError: If the file is not a recognizable image.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image file not found: {path}")
    try:
        with Image.open(path) as opened:
            opened.load()
            image = opened.convert(mode) if mode else opened.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError(f"Not a readable image: {path}") from exc
    return image


def load_leaf(path: str | Path, mode: Optional[str] = None) -> Leaf:
    return Leaf(load_image(path, mode=mode))


def save_image(
    image: RasterImage, path: str | Path, format: Optional[str] = None
) -> Path:
    """
    Write ``image`` to ``path``, creating parent directories. Images with an
    alpha channel are flattened to RGB for formats that cannot store one.

    Raises:
        InvalidArgumentError: If no writable format matches ``format`` or the
            file suffix.
    """
    path = Path(path)
    # registered_extensions also loads every plugin, filling Image.SAVE
    extensions = Image.registered_extensions()
    fmt = (format or extensions.get(path.suffix.lower(), "")).upper()
    if fmt not in Image.SAVE:
        raise InvalidArgumentError(
            f"Cannot save {path}: unsupported image format {fmt or path.suffix!r}"
        )
    path.parent.mkdir(parents=True, exist_ok=True)
    if fmt in _OPAQUE_FORMATS and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    image.save(path, format=fmt)
    return path
