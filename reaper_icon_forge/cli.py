"""Generate REAPER toolbar and track icons from the command line."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from reaper_icon_forge import config
from reaper_icon_forge.core.errors import ExportError, ImageLoadError
from reaper_icon_forge.core.exporter import IconExporter
from reaper_icon_forge.core.image_loader import load_image
from reaper_icon_forge.core.models import (
    ExportRequest,
    IconScale,
    StateImageMode,
    StateTriple,
    TrackIconSize,
)

logger = logging.getLogger(__name__)


def padding_fraction(value: str) -> float:
    padding = float(value)
    if not 0.0 <= padding <= config.MAX_PADDING:
        raise argparse.ArgumentTypeError(f"padding must be between 0 and {config.MAX_PADDING}")
    return padding


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reaper-icon-forge", description=__doc__)
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="Source image for automatic mode (omit with --manual).",
    )
    parser.add_argument("--name", default=config.DEFAULT_ICON_NAME, help="Icon file name.")

    dest = parser.add_mutually_exclusive_group()
    dest.add_argument("--dest", type=Path, help="Destination folder.")
    dest.add_argument(
        "--reaper",
        action="store_true",
        help="Export into the REAPER resource Data folder.",
    )

    parser.add_argument(
        "--scales",
        type=int,
        nargs="*",
        choices=[s.value for s in IconScale],
        default=list(config.DEFAULT_SCALES),
        help="Toolbar scales in percent (default: all).",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="*",
        choices=[s.value for s in TrackIconSize],
        default=list(config.DEFAULT_TRACK_SIZES),
        help="Track icon sizes in pixels (default: 128).",
    )
    parser.add_argument("--no-toolbar", action="store_true", help="Skip toolbar icons.")
    parser.add_argument("--no-track", action="store_true", help="Skip track icons.")
    parser.add_argument("--toggle", action="store_true", help="Also export _on toggle icons.")
    parser.add_argument(
        "--padding",
        type=padding_fraction,
        default=config.DEFAULT_PADDING,
        help=f"Margin per side as a fraction of the tile (0-{config.MAX_PADDING}).",
    )
    parser.add_argument(
        "--manual",
        nargs=3,
        type=Path,
        metavar=("NORMAL", "HOVER", "ACTIVE"),
        help="Per-state images for the OFF state (manual mode).",
    )
    parser.add_argument(
        "--manual-on",
        nargs=3,
        type=Path,
        metavar=("NORMAL", "HOVER", "ACTIVE"),
        help="Per-state images for the ON state (manual mode with --toggle).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def resolve_destination(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Path:
    if args.reaper:
        data_path = config.reaper_data_path()
        if data_path is None:
            parser.error("REAPER resource folder not found; use --dest instead")
        return data_path
    if args.dest is None:
        parser.error("one of --dest or --reaper is required")
    return args.dest


def build_request(args: argparse.Namespace, destination: Path) -> ExportRequest:
    common = dict(
        icon_name=args.name,
        destination=destination,
        scales=frozenset(args.scales),
        sizes=frozenset(args.sizes),
        generate_toolbar=not args.no_toolbar,
        generate_track=not args.no_track,
        toggle=args.toggle,
        padding=args.padding,
    )

    if args.manual:
        off_images = StateTriple(*(load_image(p) for p in args.manual))
        on_images = StateTriple(None, None, None)
        if args.manual_on:
            on_images = StateTriple(*(load_image(p) for p in args.manual_on))
        return ExportRequest(
            mode=StateImageMode.MANUAL,
            off_images=off_images,
            on_images=on_images,
            **common,
        )

    source = load_image(args.source) if args.source else None
    return ExportRequest(mode=StateImageMode.AUTOMATIC, source=source, **common)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging(args.verbose)

    if args.source and args.manual:
        parser.error("give either a source image or --manual, not both")
    if args.manual_on and not args.manual:
        parser.error("--manual-on requires --manual")
    if args.manual_on and not args.toggle:
        parser.error("--manual-on requires --toggle")

    destination = resolve_destination(args, parser)

    try:
        request = build_request(args, destination)
        result = IconExporter.export(request)
    except (FileNotFoundError, ImageLoadError) as e:
        logger.error("%s", e)
        return 1
    except ExportError as e:
        logger.error("Export failed: %s", e)
        return 1

    for path in result.written:
        print(path)
    logger.info("Wrote %d file(s)", len(result.written))
    return 0


if __name__ == "__main__":
    sys.exit(main())
