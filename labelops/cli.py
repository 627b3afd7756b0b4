"""Console scripts for labelops commands.

This module provides command-line interfaces around the labelops commands,
reading images from ``.npy`` or NIfTI files.

Console Scripts:
    minmax-radii: Compute per-region min/max centroid-to-contour radii
    copy-img: Copy an image pixel-wise
"""

import argparse
import sys
from pathlib import Path

from labelops import configure_logging, get_logger, load_image, save_image, save_radii
from labelops.plugins import CopyImage, MinMaxRadius

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging level for library messages (default: WARNING)",
    )


def minmax_radii():
    """Console script computing min/max radii of labeled regions.

    Wrapper around MinMaxRadius(selected_dims).run(load_image(input)).
    """
    parser = argparse.ArgumentParser(
        description="Compute the min and max radius from centroid to contour "
        "for every region of every 2D slice of a label image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  minmax-radii labels.npy --dims 0,1
  minmax-radii labels.nii.gz --dims 1,2 --output radii.csv
        """,
    )

    parser.add_argument("input", help="Input label image (.npy, .nii or .nii.gz)")
    parser.add_argument(
        "--dims",
        type=str,
        default="0,1",
        help="Comma-separated pair of axes spanning each slice (default: 0,1)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV path. If omitted, radii are printed to stdout",
    )
    _add_log_level_argument(parser)

    args = parser.parse_args()
    configure_logging(level=args.log_level)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input path '{input_path}' does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        command = MinMaxRadius(selected_dims=args.dims)

        print(f"Loading label image from: {input_path}")
        labels = load_image(input_path)
        print(f"Loaded label image with shape: {labels.shape}")

        radii = command.run(labels)
        pairs = radii.reshape(-1, 2)
        print(f"Measured {len(pairs)} regions")

        if args.output is not None:
            print(f"Saving radii to: {args.output}")
            save_radii(args.output, radii)
        else:
            print("min_radius,max_radius")
            for min_radius, max_radius in pairs:
                print(f"{float(min_radius)!r},{float(max_radius)!r}")

    except Exception as e:
        logger.debug("minmax-radii failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def copy_img():
    """Console script copying an image pixel-wise.

    Wrapper around CopyImage().run(load_image(input)).
    """
    parser = argparse.ArgumentParser(
        description="Copy an image pixel-wise",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  copy-img input.npy output.npy
  copy-img input.nii.gz output.nii.gz
        """,
    )

    parser.add_argument("input", help="Input image (.npy, .nii or .nii.gz)")
    parser.add_argument("output", help="Output image (.npy, .nii or .nii.gz)")
    _add_log_level_argument(parser)

    args = parser.parse_args()
    configure_logging(level=args.log_level)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input path '{input_path}' does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        print(f"Loading image from: {input_path}")
        image = load_image(input_path)
        print(f"Loaded image with shape: {image.shape}")

        copy = CopyImage().run(image)

        print(f"Saving copy to: {args.output}")
        save_image(args.output, copy)
        print("Copy completed successfully!")

    except Exception as e:
        logger.debug("copy-img failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "minmax-radii":
        sys.argv = sys.argv[1:]
        minmax_radii()
    elif len(sys.argv) > 1 and sys.argv[1] == "copy-img":
        sys.argv = sys.argv[1:]
        copy_img()
    else:
        print("Usage: python -m labelops.cli [minmax-radii|copy-img] ...")
        sys.exit(1)
