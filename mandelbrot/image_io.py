from pathlib import Path

import numpy as np
from PIL import Image


def has_known_suffix(filename) -> bool:
    """True if Pillow can pick a format from the suffix, or there is no suffix (PNG)."""
    suffix = Path(filename).suffix.lower()
    return not suffix or suffix in Image.registered_extensions()


def write_image(filename, pixels, bounds) -> Path:
    """
    Write a flat row-major grayscale buffer of size bounds = (width, height)
    as an 8-bit single-channel image. The format follows the file suffix;
    names without a suffix are written as PNG.
    """
    width, height = bounds
    data = np.asarray(pixels, dtype=np.uint8)
    if data.size != width * height:
        raise ValueError(
            f"Buffer holds {data.size} pixels, expected {width}x{height} = {width * height}"
        )

    out_path = Path(filename)
    if not has_known_suffix(out_path):
        raise ValueError(f"Unknown image file extension {out_path.suffix!r}")
    out_path.parent.mkdir(parents=True, exist_ok=True)

    im = Image.fromarray(data.reshape(height, width))
    if out_path.suffix:
        im.save(out_path)
    else:
        im.save(out_path, format="PNG")
    return out_path


def read_image(filename):
    """Load a grayscale image back as (flat uint8 buffer, (width, height))."""
    with Image.open(filename) as im:
        gray = np.asarray(im.convert("L"), dtype=np.uint8)
    height, width = gray.shape
    return gray.reshape(-1), (width, height)
