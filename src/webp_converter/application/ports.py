"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from webp_converter.formats import FrameProbe
from webp_converter.schemas import AnimatedTranscodeProfile, WebpEncodeProfile


class StaticEncoder(Protocol):
    """Encode a single-frame image into WebP."""

    def encode(
        self,
        input_path: Path,
        output_path: Path,
        profile: WebpEncodeProfile,
    ) -> None:
        """Write ``output_path`` from ``input_path``."""


class AnimationTranscoder(Protocol):
    """Transcode a multi-frame GIF into animated WebP."""

    def transcode(
        self,
        input_path: Path,
        output_path: Path,
        profile: AnimatedTranscodeProfile,
    ) -> None:
        """Write ``output_path`` from ``input_path``; raise on failure."""


__all__ = ["AnimationTranscoder", "FrameProbe", "StaticEncoder"]
