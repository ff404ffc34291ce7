"""Top-level API for recursive image-to-WebP conversion."""

from __future__ import annotations

from pathlib import Path

from webp_converter.application.results import ConversionOutcome, DirectoryStatistics

__version__ = "0.1.0"


def convert_directory_to_webp(
    pending_dir: Path,
    output_dir: Path,
    transcoder_bin: str | None = None,
    quality: int = 75,
    photo_quality: int = 80,
    effort: int = 6,
    encoder_bin: str | None = None,
) -> DirectoryStatistics:
    """Convert a directory tree of images into a mirrored WebP tree.

    Parameters
    ----------
    pending_dir : Path
        Root scanned for convertible images. Created empty if missing.
    output_dir : Path
        Root of the mirrored output tree. Created if missing.
    transcoder_bin : str | None, default=None
        ``gif2webp`` executable override for animated GIFs.
    quality : int, default=75
        WebP quality for PNG, generic and animated sources.
    photo_quality : int, default=80
        WebP quality for JPEG sources.
    effort : int, default=6
        libwebp compression method (0-6).
    encoder_bin : str | None, default=None
        ``cwebp`` executable override for PNG and JPEG sources.

    Returns
    -------
    DirectoryStatistics
        Aggregate counters for the whole tree.
    """
    from .api import convert_directory_to_webp as _impl

    return _impl(
        pending_dir=pending_dir,
        output_dir=output_dir,
        transcoder_bin=transcoder_bin,
        quality=quality,
        photo_quality=photo_quality,
        effort=effort,
        encoder_bin=encoder_bin,
    )


def convert_image_to_webp(
    input_path: Path,
    output_path: Path | None = None,
    transcoder_bin: str | None = None,
    quality: int = 75,
    photo_quality: int = 80,
    effort: int = 6,
    encoder_bin: str | None = None,
) -> ConversionOutcome | None:
    """Convert a single image file to WebP.

    Parameters
    ----------
    input_path : Path
        Source image with a supported extension.
    output_path : Path | None, default=None
        Destination path. When omitted, defaults to
        ``input_path.with_suffix(".webp")``.

    Returns
    -------
    ConversionOutcome | None
        Sizes before and after, or ``None`` if the conversion failed.

    Raises
    ------
    UnsupportedFormatError
        If ``input_path`` does not have a supported image extension.
    """
    from .api import convert_image_to_webp as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        transcoder_bin=transcoder_bin,
        quality=quality,
        photo_quality=photo_quality,
        effort=effort,
        encoder_bin=encoder_bin,
    )


__all__ = [
    "ConversionOutcome",
    "DirectoryStatistics",
    "convert_directory_to_webp",
    "convert_image_to_webp",
]
