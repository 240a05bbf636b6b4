"""
Render the Mandelbrot set in grayscale.

Run:
    python -m scripts.make_image mandel.png 1000x750 -1.20,0.35 -1,0.20

Arguments:
    FILE        output image (PNG unless the suffix says otherwise)
    PIXELS      image size as WIDTHxHEIGHT
    UPPERLEFT   upper-left corner of the viewport as RE,IM
    LOWERRIGHT  lower-right corner of the viewport as RE,IM
"""

from __future__ import annotations

import argparse
import os
import sys
import time

# Ensure repository root is on sys.path so `from mandelbrot...` works when
# running this script directly (e.g. `python scripts/make_image.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelbrot.image_io import has_known_suffix, write_image  # noqa: E402
from mandelbrot.render import MAX_PIXELS, new_buffer, render  # noqa: E402
from mandelbrot.utils import parse_bounds, parse_complex  # noqa: E402


def bounds_arg(s: str):
    bounds = parse_bounds(s)
    if bounds is None:
        raise argparse.ArgumentTypeError(
            f"invalid image size {s!r}, expected WIDTHxHEIGHT with positive integers"
        )
    width, height = bounds
    if width * height > MAX_PIXELS:
        raise argparse.ArgumentTypeError(f"image size {s!r} is too large, at most {MAX_PIXELS} pixels")
    return bounds


def output_arg(s: str) -> str:
    if not has_known_suffix(s):
        raise argparse.ArgumentTypeError(f"unknown image file extension in {s!r}")
    return s


def complex_arg(s: str) -> complex:
    point = parse_complex(s)
    if point is None:
        raise argparse.ArgumentTypeError(f"invalid complex point {s!r}, expected RE,IM")
    return point


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="make_image",
        description="Render the Mandelbrot set as a grayscale image",
    )
    parser.add_argument("file", metavar="FILE", type=output_arg, help="Output image file")
    parser.add_argument("pixels", metavar="PIXELS", type=bounds_arg,
                        help="Image size, e.g. 1000x750")
    parser.add_argument("upper_left", metavar="UPPERLEFT", type=complex_arg,
                        help="Upper-left corner, e.g. -1.20,0.35")
    parser.add_argument("lower_right", metavar="LOWERRIGHT", type=complex_arg,
                        help="Lower-right corner, e.g. -1,0.20")
    return parser


def positional_argv(argv):
    # corners like -1.20,0.35 would otherwise be taken for options
    if argv and argv[0] not in ("-h", "--help") and "--" not in argv:
        return ["--", *argv]
    return list(argv)


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(positional_argv(argv))

    width, height = args.pixels
    print(f"[run] {width}x{height} from {args.upper_left} to {args.lower_right}, saving to {args.file}")

    start_time = time.time()
    pixels = new_buffer(args.pixels)
    render(pixels, args.pixels, args.upper_left, args.lower_right)
    print(f"[run] rendered in {time.time() - start_time:.2f}s")

    try:
        out_path = write_image(args.file, pixels, args.pixels)
    except OSError as e:
        print(f"[error] could not write {args.file}: {e}", file=sys.stderr)
        return 1

    print(f"[run] done. wrote {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
