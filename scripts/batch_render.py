"""
Render every Mandelbrot view listed in a YAML config.

Run:
    python -m scripts.batch_render --config configs/views.yaml

Config:
    outdir: figures            # optional, overridden by --outdir
    views:
      - name: full
        pixels: 400x300
        upper_left: "-2.5,1.25"
        lower_right: "1.0,-1.25"

Outputs:
    <outdir>/<name>.png
    <outdir>/summary.csv
"""

from __future__ import annotations

import argparse
import csv
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import yaml

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelbrot.image_io import write_image  # noqa: E402
from mandelbrot.render import MAX_PIXELS, render_image  # noqa: E402
from mandelbrot.utils import parse_bounds, parse_complex  # noqa: E402


def load_views(cfg: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Validate the `views` section of a config. Every view is checked before
    anything is rendered, so one bad entry fails the whole batch.
    """
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping, got {type(cfg).__name__}")
    views = cfg.get("views") or []
    if not isinstance(views, list) or not views:
        raise ValueError("Config must contain a non-empty 'views' list")

    parsed = []
    seen = set()
    for i, view in enumerate(views):
        if not isinstance(view, dict):
            raise ValueError(f"View {i}: expected a mapping, got {type(view).__name__}")
        name = str(view.get("name", f"view_{i}"))
        # names become file names inside outdir
        if name in ("", ".", "..") or Path(name).name != name:
            raise ValueError(f"View {i}: invalid name {name!r}")
        if name in seen:
            raise ValueError(f"View {i}: duplicate name {name!r}")
        seen.add(name)

        bounds = parse_bounds(str(view.get("pixels", "")))
        if bounds is None:
            raise ValueError(f"View {name!r}: invalid pixels {view.get('pixels')!r}")
        if bounds[0] * bounds[1] > MAX_PIXELS:
            raise ValueError(f"View {name!r}: pixels {view.get('pixels')!r} exceed {MAX_PIXELS} pixels")

        corners = {}
        for key in ("upper_left", "lower_right"):
            point = parse_complex(str(view.get(key, "")))
            if point is None:
                raise ValueError(f"View {name!r}: invalid {key} {view.get(key)!r}")
            corners[key] = point

        parsed.append({"name": name, "bounds": bounds, **corners})
    return parsed


def run_batch(cfg: Dict[str, Any], outdir=None) -> Path:
    views = load_views(cfg)
    outdir = Path(outdir or cfg.get("outdir", "figures"))
    outdir.mkdir(parents=True, exist_ok=True)

    rows = []
    for view in views:
        width, height = view["bounds"]
        print(f"[batch] {view['name']}: {width}x{height}")
        start_time = time.time()

        pixels = render_image(view["bounds"], view["upper_left"], view["lower_right"])
        out_path = write_image(outdir / f"{view['name']}.png", pixels, view["bounds"])

        # interior points are the only ones rendered as 0
        inside_fraction = float(np.mean(pixels == 0))
        print(f"[batch]   saved {out_path} ({time.time() - start_time:.2f}s, inside={inside_fraction:.3f})")
        rows.append({
            "name": view["name"],
            "width": width,
            "height": height,
            "inside_fraction": inside_fraction,
            "path": str(out_path),
        })

    summary_path = outdir / "summary.csv"
    with open(summary_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["name", "width", "height", "inside_fraction", "path"])
        writer.writeheader()
        writer.writerows(rows)
    print(f"[batch] wrote {summary_path}")
    return summary_path


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render Mandelbrot views listed in a YAML config")
    parser.add_argument("--config", required=True, help="Path to YAML config")
    parser.add_argument("--outdir", default=None, help="Output directory (overrides config)")
    args = parser.parse_args(argv)

    with open(args.config, "r") as f:
        cfg = yaml.safe_load(f) or {}

    run_batch(cfg, args.outdir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
