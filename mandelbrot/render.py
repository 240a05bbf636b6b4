import numpy as np

from mandelbrot.iterators import ESCAPE_LIMIT, escape_time

# largest buffer numpy can address
MAX_PIXELS = np.iinfo(np.intp).max


def pixel_to_point(bounds, pixel, upper_left: complex, lower_right: complex) -> complex:
    """
    Map pixel (column, row) of an image of size bounds = (width, height)
    to the corresponding point of the complex plane.

    Rows grow downward while the imaginary part decreases, so the row offset
    is subtracted from upper_left.imag.
    """
    width, height = bounds
    column, row = pixel
    width_span = lower_right.real - upper_left.real
    height_span = upper_left.imag - lower_right.imag
    return complex(
        upper_left.real + column * width_span / width,
        upper_left.imag - row * height_span / height,
    )


def intensity(count) -> int:
    """Map an escape count to grayscale: fast escape is bright, no escape is black."""
    if count is None:
        return 0
    return 255 - count


def new_buffer(bounds) -> np.ndarray:
    """Allocate a zeroed row-major uint8 buffer for an image of size (width, height)."""
    width, height = bounds
    if width <= 0 or height <= 0:
        raise ValueError(f"Image bounds must be positive, got {width}x{height}")
    if width * height > MAX_PIXELS:
        raise ValueError(f"Image bounds {width}x{height} exceed {MAX_PIXELS} addressable pixels")
    return np.zeros(width * height, dtype=np.uint8)


def render(pixels, bounds, upper_left: complex, lower_right: complex):
    """
    Fill `pixels` (flat, row-major, length width*height) with the grayscale
    escape-time rendering of the rectangle upper_left..lower_right.
    """
    width, height = bounds
    if len(pixels) != width * height:
        raise ValueError(
            f"Buffer holds {len(pixels)} pixels, expected {width}x{height} = {width * height}"
        )

    for row in range(height):
        for column in range(width):
            point = pixel_to_point(bounds, (column, row), upper_left, lower_right)
            pixels[row * width + column] = intensity(escape_time(point, ESCAPE_LIMIT))


def render_image(bounds, upper_left: complex, lower_right: complex) -> np.ndarray:
    pixels = new_buffer(bounds)
    render(pixels, bounds, upper_left, lower_right)
    return pixels
