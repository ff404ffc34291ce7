"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from webp_converter.application.options import ConversionOptions
from webp_converter.application.ports import (
    AnimationTranscoder,
    FrameProbe,
    StaticEncoder,
)
from webp_converter.application.results import (
    ConversionOutcome,
    DirectoryStatistics,
    merge_statistics,
)


def build_conversion_options(
    *,
    quality: int = 75,
    photo_quality: int = 80,
    effort: int = 6,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from webp_converter.application.use_cases import build_conversion_options as _impl

    return _impl(quality=quality, photo_quality=photo_quality, effort=effort)


def convert_file(
    input_path: Path,
    output_path: Path,
    *,
    options: ConversionOptions | None = None,
    encoder: StaticEncoder | None = None,
    transcoder: AnimationTranscoder | None = None,
    probe: FrameProbe | None = None,
) -> ConversionOutcome | None:
    """Convert one image file via lazy use-case import."""
    from webp_converter.application.use_cases import convert_file as _impl

    return _impl(
        input_path,
        output_path,
        options=options,
        encoder=encoder,
        transcoder=transcoder,
        probe=probe,
    )


def walk_directory(
    source_dir: Path,
    output_root: Path,
    *,
    source_root: Path | None = None,
    options: ConversionOptions | None = None,
    encoder: StaticEncoder | None = None,
    transcoder: AnimationTranscoder | None = None,
    probe: FrameProbe | None = None,
) -> DirectoryStatistics:
    """Walk and convert a directory tree via lazy use-case import."""
    from webp_converter.application.use_cases import walk_directory as _impl

    return _impl(
        source_dir,
        output_root,
        source_root=source_root,
        options=options,
        encoder=encoder,
        transcoder=transcoder,
        probe=probe,
    )


def run_conversion(
    *,
    pending_dir: Path,
    output_dir: Path,
    options: ConversionOptions | None = None,
    transcoder_bin: str | None = None,
    encoder_bin: str | None = None,
) -> DirectoryStatistics:
    """Run a whole-tree conversion via lazy use-case import."""
    from webp_converter.application.use_cases import run_conversion as _impl

    return _impl(
        pending_dir=pending_dir,
        output_dir=output_dir,
        options=options,
        transcoder_bin=transcoder_bin,
        encoder_bin=encoder_bin,
    )


__all__ = [
    "ConversionOptions",
    "ConversionOutcome",
    "DirectoryStatistics",
    "merge_statistics",
    "build_conversion_options",
    "convert_file",
    "walk_directory",
    "run_conversion",
]
