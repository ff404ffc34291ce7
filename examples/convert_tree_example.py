#!/usr/bin/env python3
"""Example: convert a generated image tree to WebP and print the summary."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from PIL import Image

from webp_converter import convert_directory_to_webp
from webp_converter.report import format_summary


def _build_sample_tree(root: Path) -> None:
    (root / "photos" / "2024").mkdir(parents=True)
    (root / "icons").mkdir()
    Image.new("RGB", (640, 480), "steelblue").save(root / "photos" / "2024" / "lake.jpg", quality=95)
    Image.new("RGBA", (64, 64), (255, 128, 0, 200)).save(root / "icons" / "badge.png")
    Image.new("RGB", (320, 200), "white").save(root / "scan.bmp")
    (root / "notes.txt").write_text("skipped: not an image\n")


def main() -> None:
    """Run the example end to end in a temporary directory."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    with tempfile.TemporaryDirectory() as tmp:
        pending = Path(tmp) / "to-be-converted"
        output = Path(tmp) / "converted"
        _build_sample_tree(pending)

        stats = convert_directory_to_webp(pending, output, photo_quality=82)

        print()
        print("\n".join(format_summary(stats, output)))
        for path in sorted(output.rglob("*.webp")):
            print(f"  {path.relative_to(output)}")


if __name__ == "__main__":
    main()
