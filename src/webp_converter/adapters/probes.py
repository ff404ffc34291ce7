"""Image metadata probes implementing application ports."""

from __future__ import annotations

from pathlib import Path


class PillowFrameProbe:
    """Count frames with Pillow without decoding pixel data."""

    def frame_count(self, path: Path) -> int:
        """Return the number of frames/pages in ``path``.

        Raises whatever Pillow raises for unreadable or truncated files;
        callers decide how to treat probe failures.
        """
        from PIL import Image

        with Image.open(path) as image:
            return int(getattr(image, "n_frames", 1))
