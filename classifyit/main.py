"""Command-line interface for ClassifyIt."""

from __future__ import annotations

import argparse
import logging
import sys

from .batch import process_directory, process_image
from .compositor import BannerCompositor
from .config import Config
from .exceptions import BatchError, ClassifyItError
from .fonts import load_font
from .logging_config import setup_logging
from .presets import CLASSIFICATIONS, resolve_banner_spec
from .validators import validate_file_path

logger = logging.getLogger("classifyit.main")

EPILOG = """\
examples:
  file mode:       classifyit -f scan.png -c cui -o my_output -H 80 -l corners
  directory mode:  classifyit -d scans/ -c secret -o classified_results -H 100 -l center
  custom mode:     classifyit -f scan.jpg -c custom --text SENSITIVE \\
                       --background-color 255,255,0 --text-color 0,0,0
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="classifyit",
        description="Add classification banners to the top and bottom of PNG and JPEG images",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", help="Single image file to classify")
    source.add_argument("-d", "--dir", help="Directory containing images to classify")

    parser.add_argument(
        "-c",
        "--classification",
        required=True,
        type=str.lower,
        choices=CLASSIFICATIONS,
        help="Classification type",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=Config.DEFAULT_OUTPUT_DIR,
        help=f"Output directory for classified images (default: {Config.DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "-H",
        "--banner-height",
        type=int,
        default=Config.DEFAULT_BANNER_HEIGHT,
        help=f"Banner height in pixels (default: {Config.DEFAULT_BANNER_HEIGHT})",
    )
    parser.add_argument(
        "-l",
        "--location",
        default=Config.DEFAULT_PLACEMENT,
        help="Location of banner text: 'center' (default) or 'corners'",
    )

    custom = parser.add_argument_group("custom classification")
    custom.add_argument("--text", default="", help="Banner text (required with -c custom)")
    custom.add_argument(
        "--background-color",
        default=Config.DEFAULT_CUSTOM_BACKGROUND,
        help=f"Comma-separated R,G,B background color (default: {Config.DEFAULT_CUSTOM_BACKGROUND})",
    )
    custom.add_argument(
        "--text-color",
        default=Config.DEFAULT_CUSTOM_TEXT_COLOR,
        help=f"Comma-separated R,G,B text color (default: {Config.DEFAULT_CUSTOM_TEXT_COLOR})",
    )

    fonts = parser.add_argument_group("font")
    fonts.add_argument("--font", default=None, help="Path to a TrueType/OpenType font file")
    fonts.add_argument(
        "--font-size",
        type=int,
        default=Config.DEFAULT_FONT_SIZE,
        help=f"Label font size in pixels (default: {Config.DEFAULT_FONT_SIZE})",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level (default: ${Config.LOG_LEVEL_ENV} or INFO)",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command line and return the process exit code."""
    try:
        spec = resolve_banner_spec(
            args.classification,
            banner_height=args.banner_height,
            placement=args.location,
            text=args.text,
            background_color=args.background_color,
            text_color=args.text_color,
        )
        font = load_font(args.font_size, args.font)
    except ClassifyItError as e:
        logger.error("Error: %s", e)
        return 1

    compositor = BannerCompositor(font)

    if args.file:
        try:
            validate_file_path(args.file)
            written = process_image(args.file, spec, args.output, compositor)
        except ClassifyItError as e:
            logger.error("Error processing file '%s': %s", args.file, e)
            return 1
        logger.info("File classified successfully: %s -> %s", args.file, written)
        return 0

    try:
        process_directory(args.dir, spec, args.output, compositor)
    except BatchError as e:
        logger.error(
            "Error processing directory '%s': %s (%d of %d failed)",
            args.dir, e, len(e.result.failed), e.result.total,
        )
        return 1
    except ClassifyItError as e:
        logger.error("Error processing directory '%s': %s", args.dir, e)
        return 1
    logger.info("All images in directory classified successfully: %s", args.dir)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
