import re
from pathlib import Path


def replace(target: str, replacement: str, text: str) -> str:
    """Replace every match of the regular expression `target` in `text`."""
    return re.compile(target).sub(replacement, text)


def replace_file(target: str, replacement: str, src, dst) -> Path:
    text = Path(src).read_text(encoding="utf-8")
    out_path = Path(dst)
    out_path.write_text(replace(target, replacement, text), encoding="utf-8")
    return out_path
