"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from webp_converter.adapters.encoders import Gif2WebpTranscoder, WebpStaticEncoder
from webp_converter.adapters.probes import PillowFrameProbe
from webp_converter.application.options import ConversionOptions
from webp_converter.application.ports import (
    AnimationTranscoder,
    FrameProbe,
    StaticEncoder,
)
from webp_converter.application.results import ConversionOutcome, DirectoryStatistics
from webp_converter.errors import ConversionError, SetupError
from webp_converter.formats import (
    conversion_route,
    format_class,
    is_supported,
    mirrored_output_path,
    normalize_extension,
)
from webp_converter.report import describe_outcome
from webp_converter.schemas import (
    AnimatedTranscodeProfile,
    ConversionRunConfig,
    WebpEncodeProfile,
)

logger = logging.getLogger(__name__)


def convert_file(
    input_path: Path,
    output_path: Path,
    *,
    options: ConversionOptions | None = None,
    encoder: StaticEncoder | None = None,
    transcoder: AnimationTranscoder | None = None,
    probe: FrameProbe | None = None,
) -> ConversionOutcome | None:
    """Use-case: convert one image file into WebP.

    Returns ``None`` when the file is unsupported or the conversion fails;
    the failure is logged and never propagated.
    """
    ext = normalize_extension(input_path.suffix)
    if not is_supported(ext):
        logger.info("Skipping unsupported file: %s", input_path.name)
        return None

    options = options or ConversionOptions()
    encoder = encoder or WebpStaticEncoder()
    transcoder = transcoder or Gif2WebpTranscoder()
    probe = probe or PillowFrameProbe()

    try:
        original_size = input_path.stat().st_size
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if conversion_route(input_path, probe=probe) == "animated":
            transcoder.transcode(input_path, output_path, options.animated)
        else:
            encoder.encode(
                input_path,
                output_path,
                options.static_profile(format_class(ext)),
            )

        new_size = output_path.stat().st_size
    except Exception as exc:
        # Any failure stays local to this file.
        logger.error("✗ Error converting %s: %s", input_path.name, exc)
        return None

    outcome = ConversionOutcome(success=True, original_size=original_size, new_size=new_size)
    for line in describe_outcome(input_path.name, outcome):
        logger.info(line)
    return outcome


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
    """Use-case: convert every supported file below ``source_dir``.

    Output paths mirror each file's location relative to ``source_root``
    (defaults to ``source_dir``). A directory that cannot be listed is
    logged and contributes whatever was gathered before the failure.
    """
    source_root = source_root if source_root is not None else source_dir
    options = options or ConversionOptions()
    encoder = encoder or WebpStaticEncoder()
    transcoder = transcoder or Gif2WebpTranscoder()
    probe = probe or PillowFrameProbe()

    stats = DirectoryStatistics.empty()
    try:
        with os.scandir(source_dir) as entries:
            for entry in entries:
                entry_path = Path(entry.path)
                if entry.is_dir(follow_symlinks=False):
                    child = walk_directory(
                        entry_path,
                        output_root,
                        source_root=source_root,
                        options=options,
                        encoder=encoder,
                        transcoder=transcoder,
                        probe=probe,
                    )
                    stats = stats.merge(child)
                elif entry.is_file(follow_symlinks=False):
                    ext = normalize_extension(entry_path.suffix)
                    if not is_supported(ext):
                        logger.info("Skipping unsupported file: %s", entry.name)
                        continue
                    outcome = convert_file(
                        entry_path,
                        mirrored_output_path(entry_path, source_root, output_root),
                        options=options,
                        encoder=encoder,
                        transcoder=transcoder,
                        probe=probe,
                    )
                    stats = stats.record(ext, outcome)
    except OSError as exc:
        logger.error("Error processing directory %s: %s", source_dir, exc)

    return stats


def run_conversion(
    *,
    pending_dir: Path,
    output_dir: Path,
    options: ConversionOptions | None = None,
    transcoder_bin: str | None = None,
    encoder_bin: str | None = None,
    encoder: StaticEncoder | None = None,
    transcoder: AnimationTranscoder | None = None,
    probe: FrameProbe | None = None,
) -> DirectoryStatistics:
    """Use-case: prepare both roots and convert the whole pending tree.

    Raises
    ------
    ConversionError
        If the run configuration is invalid.
    SetupError
        If either root directory cannot be created.
    """
    try:
        config = ConversionRunConfig(
            pending_dir=pending_dir,
            output_dir=output_dir,
            transcoder_bin=transcoder_bin,
            encoder_bin=encoder_bin,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion parameters: {exc}") from exc

    for root in (config.pending_dir, config.output_dir):
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SetupError(f"Cannot prepare directory {root}: {exc}") from exc

    logger.debug("Converting %s into %s", config.pending_dir, config.output_dir)
    return walk_directory(
        config.pending_dir,
        config.output_dir,
        source_root=config.pending_dir,
        options=options,
        encoder=encoder or WebpStaticEncoder(config.encoder_bin),
        transcoder=transcoder or Gif2WebpTranscoder(config.transcoder_bin),
        probe=probe,
    )


def build_conversion_options(
    *,
    quality: int = 75,
    photo_quality: int = 80,
    effort: int = 6,
) -> ConversionOptions:
    """Build typed option object from command/API params.

    ``quality`` drives the lossless-class, generic and animated profiles;
    ``photo_quality`` drives JPEG sources; ``effort`` is the libwebp method.
    """
    try:
        return ConversionOptions(
            lossless=WebpEncodeProfile(
                quality=quality,
                method=effort,
                near_lossless=True,
                smart_subsample=True,
            ),
            photographic=WebpEncodeProfile(
                quality=photo_quality,
                method=effort,
                smart_subsample=True,
            ),
            generic=WebpEncodeProfile(quality=quality, method=effort),
            animated=AnimatedTranscodeProfile(
                quality=quality,
                method=effort,
                minimize_size=True,
                multi_threaded=True,
            ),
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid encoder settings: {exc}") from exc
