"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from webp_converter.application.results import ConversionOutcome, DirectoryStatistics
from webp_converter.application.use_cases import build_conversion_options
from webp_converter.application.use_cases import convert_file
from webp_converter.application.use_cases import run_conversion
from webp_converter.adapters.encoders import Gif2WebpTranscoder, WebpStaticEncoder
from webp_converter.errors import ConversionError, UnsupportedFormatError
from webp_converter.formats import SUPPORTED_EXTENSIONS, is_supported


def convert_directory_to_webp(
    pending_dir: Path,
    output_dir: Path,
    transcoder_bin: Optional[str] = None,
    quality: int = 75,
    photo_quality: int = 80,
    effort: int = 6,
    encoder_bin: Optional[str] = None,
) -> DirectoryStatistics:
    """Convert every supported image below ``pending_dir`` into ``output_dir``."""
    options = build_conversion_options(
        quality=quality,
        photo_quality=photo_quality,
        effort=effort,
    )
    return run_conversion(
        pending_dir=pending_dir,
        output_dir=output_dir,
        options=options,
        transcoder_bin=transcoder_bin,
        encoder_bin=encoder_bin,
    )


def convert_image_to_webp(
    input_path: Path,
    output_path: Optional[Path] = None,
    transcoder_bin: Optional[str] = None,
    quality: int = 75,
    photo_quality: int = 80,
    effort: int = 6,
    encoder_bin: Optional[str] = None,
) -> Optional[ConversionOutcome]:
    """Convert a single image; ``output_path`` defaults to a sibling ``.webp``."""
    if not is_supported(input_path.suffix):
        supported = ", ".join(sorted(SUPPORTED_EXTENSIONS))
        raise UnsupportedFormatError(
            f"Unsupported image format {input_path.suffix!r} for {input_path.name}. "
            f"Supported: {supported}."
        )
    options = build_conversion_options(
        quality=quality,
        photo_quality=photo_quality,
        effort=effort,
    )
    target = output_path or input_path.with_suffix(".webp")
    if target.resolve() == input_path.resolve():
        raise ConversionError(f"Refusing to overwrite source image {input_path}.")
    return convert_file(
        input_path,
        target,
        options=options,
        encoder=WebpStaticEncoder(encoder_bin),
        transcoder=Gif2WebpTranscoder(transcoder_bin),
    )
