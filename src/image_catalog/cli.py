"""Command-line entry point: pick a folder of images and build a catalog PDF.

Exit codes:
    0 - catalog written (or folder prompt cancelled)
    1 - nothing to do or unusable input (no images, bad folder, bad layout)
    2 - catalog written, but some images could not be placed
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .catalog import EmptyInputError, UserCancelled, choose_folder
from .controller import CatalogConfig, CatalogError, build_catalog
from .layout import InvalidGridError, LayoutConfig, page_size_in_units

logger = logging.getLogger("image_catalog")

EXIT_OK = 0
EXIT_NOTHING_TO_DO = 1
EXIT_PLACEMENT_FAILURES = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-catalog",
        description="Lay out a folder of images as a paginated contact-sheet PDF.",
    )
    parser.add_argument("folder", nargs="?", type=Path,
                        help="Folder with source images (prompts when omitted)")
    parser.add_argument("-o", "--output", type=Path,
                        help="Output PDF path (default: <folder>/catalog.pdf)")
    parser.add_argument("--config", type=Path,
                        help="JSON file with layout settings")
    parser.add_argument("--title", help=r"Header text; '\n' starts a new line")
    parser.add_argument("--columns", help="Comma-separated column titles, left to right")
    parser.add_argument("--rows", type=int, help="Image rows per page")
    parser.add_argument("--cols", type=int, help="Image columns per page")
    parser.add_argument("--margin", type=float, help="Page margin in page units")
    parser.add_argument("--gutter", type=float, help="Spacing between cells in page units")
    parser.add_argument("--caption-height", type=float, help="Caption band height in page units")
    parser.add_argument("--page-size", help="Paper size: letter, legal, a3, a4, a5")
    parser.add_argument("--strict-extensions", action="store_true",
                        help="Only match extensions at the end of filenames")
    parser.add_argument("--no-metadata", action="store_true",
                        help="Do not write catalog_metadata.json")
    parser.add_argument("--outlines", action="store_true",
                        help="Draw an outline around every image frame")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_layout(args: argparse.Namespace) -> LayoutConfig:
    """
    Build the layout from an optional JSON file plus command-line overrides.

    Raises:
        ValueError: If a setting is invalid or the file is not valid JSON
        OSError: If the config file cannot be read
    """
    data: Dict[str, Any] = {}
    if args.config:
        try:
            data = json.loads(args.config.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Config file {args.config} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config file {args.config} must hold a JSON object")
    layout = LayoutConfig.from_dict(data)

    overrides: Dict[str, Any] = {}
    if args.page_size:
        width, height = page_size_in_units(args.page_size, layout.unit_pt)
        overrides.update(page_width=width, page_height=height)
    if args.title is not None:
        overrides["title"] = args.title.replace("\\n", "\n")
    if args.rows is not None:
        overrides["rows"] = args.rows
    if args.cols is not None:
        overrides["cols"] = args.cols
        if args.columns is None and layout.column_labels is not None \
                and len(layout.column_labels) != args.cols:
            overrides["column_labels"] = None
    if args.columns is not None:
        overrides["column_labels"] = tuple(c.strip() for c in args.columns.split(","))
    if args.margin is not None:
        overrides["margin"] = args.margin
    if args.gutter is not None:
        overrides["gutter"] = args.gutter
    if args.caption_height is not None:
        overrides["caption_height"] = args.caption_height

    return replace(layout, **overrides) if overrides else layout


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        layout = load_layout(args)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid layout settings: {e}")
        return EXIT_NOTHING_TO_DO

    folder = args.folder
    if folder is None:
        try:
            folder = choose_folder()
        except UserCancelled:
            return EXIT_OK

    config = CatalogConfig(
        image_dir=folder,
        output_path=args.output,
        layout=layout,
        strict_extensions=args.strict_extensions,
        write_metadata=not args.no_metadata,
        draw_frame_outlines=args.outlines,
    )

    try:
        result = build_catalog(config)
    except EmptyInputError as e:
        logger.error(f"Nothing to do: {e}")
        return EXIT_NOTHING_TO_DO
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(str(e))
        return EXIT_NOTHING_TO_DO
    except InvalidGridError as e:
        logger.error(f"Layout does not fit the page: {e}")
        return EXIT_NOTHING_TO_DO
    except CatalogError as e:
        logger.error(str(e))
        return EXIT_NOTHING_TO_DO

    print(f"Done: {result.pdf_path} ({result.image_count} images, {result.page_count} pages)")
    if result.failures:
        print(f"{len(result.failures)} images could not be placed:")
        for failure in result.failures:
            print(f"  - {failure}")
        return EXIT_PLACEMENT_FAILURES
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
