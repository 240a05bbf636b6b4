"""
Replace every match of a regular expression in a text file.

Run:
    python -m scripts.quickreplace "world" "Mandelbrot" input.txt output.txt
"""

from __future__ import annotations

import argparse
import os
import re
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelbrot.replace import replace_file  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="quickreplace",
        description="Replace all occurrences of a pattern in a file",
    )
    parser.add_argument("target", help="Regular expression to search for")
    parser.add_argument("replacement", help="Replacement text")
    parser.add_argument("input", help="File to read")
    parser.add_argument("output", help="File to write")
    args = parser.parse_args(argv)

    try:
        replace_file(args.target, args.replacement, args.input, args.output)
    except (re.error, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
