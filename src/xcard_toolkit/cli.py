"""
Command-line interface for splitting text and images into card pages.

Reads a UTF-8 text file containing ``[image N]`` markers plus the image
files those markers refer to, reconciles the markers, paginates, and
prints the page plan as JSON. Optionally writes the bitmap for every
image item (whole images and slices) to a directory.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xcard_toolkit import __version__
from xcard_toolkit.core.models import Page
from xcard_toolkit.images import ImageDecodeError, collect_dimensions, crop_slice, open_image
from xcard_toolkit.layout import (
    AspectRatio,
    Language,
    PaginationConstraints,
    card_heights,
    paginate,
    reconcile_markers,
)
from xcard_toolkit.layout.config import MAX_IMAGES, PREVIEW_WIDTH_PX

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xcards",
        description="Split text with inline [image N] markers into fixed-ratio card pages.",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to a UTF-8 text file with the card content.",
    )
    parser.add_argument(
        "--image",
        dest="images",
        type=Path,
        action="append",
        default=[],
        help=(
            f"Image file referenced as [image N], in order (repeatable, max {MAX_IMAGES}). "
            "Images no marker refers to are dropped."
        ),
    )
    parser.add_argument(
        "--ratio",
        choices=[r.value for r in AspectRatio],
        default=AspectRatio.PORTRAIT_3_4.value,
        help="Card aspect ratio (default: 3:4).",
    )
    parser.add_argument(
        "--preview-width",
        type=int,
        default=PREVIEW_WIDTH_PX,
        help=f"Card width in pixels (default: {PREVIEW_WIDTH_PX}).",
    )
    parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        default=Language.ZH.value,
        help="Display language (default: zh).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON page plan to this file instead of stdout.",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        help="Directory where the bitmap of every image item is written as PNG.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_plan(pages: List[Page], constraints: PaginationConstraints) -> dict:
    """JSON-serializable page plan."""
    return {
        "constraints": {
            "content_width": constraints.content_width,
            "max_chars_per_line": constraints.max_chars_per_line,
            "max_page_height": constraints.max_page_height,
            "fixed_chrome": constraints.fixed_chrome,
            "language": constraints.language.value,
        },
        "page_count": len(pages),
        "card_heights": card_heights(pages, constraints),
        "pages": [page.to_dict() for page in pages],
    }


def export_images(pages: List[Page], constraints: PaginationConstraints, export_dir: Path) -> List[Path]:
    """
    Write the bitmap of every image item as ``page-<n>-item-<m>.png``.

    Raises:
        ImageDecodeError: If a referenced image cannot be opened
    """
    export_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for page in pages:
        for position, item in enumerate(page.items, start=1):
            if item.kind != "image":
                continue
            with open_image(item.ref) as source:
                bitmap = crop_slice(source, item, constraints.content_width)
            target = export_dir / f"page-{page.index + 1}-item-{position}.png"
            bitmap.save(target)
            written.append(target)
            logger.debug(f"Wrote {target}")
    logger.info(f"Exported {len(written)} image items to {export_dir}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(message)s",
    )

    try:
        content = args.input.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1

    if len(args.images) > MAX_IMAGES:
        logger.warning(f"Only the first {MAX_IMAGES} images are used")
    images = [str(path) for path in args.images[:MAX_IMAGES]]

    content, images = reconcile_markers(content, images)
    try:
        constraints = PaginationConstraints.for_ratio(
            AspectRatio(args.ratio),
            preview_width=args.preview_width,
            language=Language(args.lang),
        )
    except ValueError as e:
        logger.error(f"Invalid card size: {e}")
        return 2
    pages = paginate(content, images, collect_dimensions(images), constraints)

    plan = json.dumps(build_plan(pages, constraints), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(plan + "\n", encoding="utf-8")
        logger.info(f"Wrote page plan to {args.output}")
    else:
        sys.stdout.write(plan + "\n")

    if args.export_dir:
        try:
            export_images(pages, constraints, args.export_dir)
        except (ImageDecodeError, OSError) as e:
            logger.error(f"Export failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
