# mandelbrot/utils.py
from typing import Callable, Optional, Tuple


def parse_pair(s: str, separator: str, parse: Callable = int) -> Optional[Tuple]:
    """
    Parse strings like '400x600' or '1.0,0.5' into a pair of values.

    The string is split on the first occurrence of `separator` and both
    halves are converted with `parse` (int, float, ...). Returns None if the
    separator is missing, either half is empty or padded with whitespace, or
    either half fails to convert ('10,20xy'). Underscores and
    non-ASCII characters are rejected as well.
    """
    index = s.find(separator)
    if index < 0:
        return None
    left, right = s[:index], s[index + 1:]
    if not left or not right:
        return None
    if left != left.strip() or right != right.strip():
        return None
    # int() and float() also take digit separators and non-ASCII digits
    if "_" in s or not s.isascii():
        return None
    try:
        return parse(left), parse(right)
    except ValueError:
        return None


def parse_complex(s: str) -> Optional[complex]:
    """
    Parse 'RE,IM' strings like '-1.20,0.35' into a complex number.
    """
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    re, im = pair
    return complex(re, im)


def parse_bounds(s: str) -> Optional[Tuple[int, int]]:
    """Parse 'WIDTHxHEIGHT' into (width, height); both must be positive."""
    pair = parse_pair(s, "x", int)
    if pair is None:
        return None
    width, height = pair
    if width <= 0 or height <= 0:
        return None
    return width, height
