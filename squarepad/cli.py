"""
Headless conversion: pad an image to a 1:1 square filled with its dominant color.

Usage
  squarepad-cli photo.jpg                      -> resized-image-1x1.png
  squarepad-cli photo.jpg -o out.png --compact
  squarepad-cli photo.jpg --data-uri > uri.txt

The info line ("{side}×{side}px | 1:1 | rgb(...)") is printed to stdout.
Exit status: 0 on success, 1 on processing errors, 2 on usage errors.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from squarepad.config import DEFAULT_CONFIG
from squarepad.errors import SquarePadError
from squarepad.services.color_service import DominantColorSampler
from squarepad.services.compose_service import SquareCompositor, to_data_uri
from squarepad.services.image_service import ImageService

_cli_logger = logging.getLogger("SquarePad.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="squarepad-cli",
        description="Center an image on a square canvas padded with its dominant color.",
    )
    parser.add_argument("input_path", help="Path to the input image.")
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_CONFIG.download_filename,
        help=f"Output PNG path (default: {DEFAULT_CONFIG.download_filename}).",
    )
    parser.add_argument("--data-uri", action="store_true", help="Also print the PNG as a base64 data URI.")
    parser.add_argument(
        "--sample-size",
        type=int,
        default=DEFAULT_CONFIG.sample_size,
        help="Longer side of the downsampled copy used for color statistics.",
    )
    parser.add_argument(
        "--stride",
        type=int,
        default=DEFAULT_CONFIG.sample_stride,
        help="Visit every N-th pixel of the downsampled copy (1 = all pixels).",
    )
    parser.add_argument("--compact", action="store_true", help="Print the compact info line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = dataclasses.replace(DEFAULT_CONFIG, sample_size=args.sample_size, sample_stride=args.stride)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        image_data = ImageService().load_image(args.input_path)
        color = DominantColorSampler(config).sample(image_data.pil_image)
        result = SquareCompositor().compose(image_data.pil_image, color, compact=args.compact)
        output_path = Path(args.output)
        output_path.write_bytes(result.png_bytes)
    except (SquarePadError, OSError) as exc:
        _cli_logger.error(f"{exc}")
        return 1

    _cli_logger.info(f"Wrote {output_path}")
    sys.stdout.write(result.info + "\n")
    if args.data_uri:
        sys.stdout.write(to_data_uri(result.png_bytes) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
