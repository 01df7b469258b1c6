"""Example storyboard built from three images.

Lays out ``Row[A, Column[Row[A, B], C], B]``, renders it and saves the result::

    python -m storyboard.examples.demo a.jpg b.jpg c.jpg --width 1000 -o result.jpeg
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from storyboard.cells import Column, Leaf, Row
from storyboard.config import DEFAULT_CONFIG, RESAMPLE_REGISTRY
from storyboard.errors import StoryboardError
from storyboard.imaging.io import load_leaf, save_image
from storyboard.renderer.storyboard import DEFAULT_WIDTH, StoryboardRenderer
from storyboard.utils.logging_config import setup_logging

DEFAULT_OUTPUT = "result.jpeg"

logger = logging.getLogger(__name__)


def build_example_tree(a: Leaf, b: Leaf, c: Leaf) -> Row:
    """``a`` and ``b`` appear twice; leaves may be shared between composites."""
    return (
        Row()
        .add(a)
        .add(Column().add(Row().add(a).add(b)).add(c))
        .add(b)
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compose three images into a storyboard."
    )
    parser.add_argument("images", nargs=3, type=Path, metavar="IMAGE")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("-o", "--output", type=Path, default=Path(DEFAULT_OUTPUT))
    parser.add_argument(
        "--resample", choices=sorted(RESAMPLE_REGISTRY), default="lanczos"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = DEFAULT_CONFIG.with_resample(args.resample)
        leaves = [load_leaf(path, mode=config.mode) for path in args.images]
        root = build_example_tree(*leaves)
        image = StoryboardRenderer(width=args.width, config=config).render(root)
        saved = save_image(image, args.output)
    except (StoryboardError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("Saved %dx%d storyboard to %s", image.width, image.height, saved)
    return 0


if __name__ == "__main__":
    sys.exit(main())
