"""Format registry and conversion-route classification."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from webp_converter.types import ConversionRoute, FormatClass, StrPath

logger = logging.getLogger(__name__)

TARGET_EXTENSION = ".webp"

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".gif",
        ".png",
        ".jpg",
        ".jpeg",
        ".tiff",
        ".bmp",
        ".webp",
        ".avif",
    }
)

ANIMATED_CAPABLE_EXTENSIONS: frozenset[str] = frozenset({".gif"})
LOSSLESS_EXTENSIONS: frozenset[str] = frozenset({".png"})
PHOTOGRAPHIC_EXTENSIONS: frozenset[str] = frozenset({".jpg", ".jpeg"})


class FrameProbe(Protocol):
    """Report how many frames an image asset contains."""

    def frame_count(self, path: Path) -> int:
        """Return the number of frames/pages in the asset."""


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and make sure it carries a leading dot.

    Parameters
    ----------
    extension : str
        Raw extension such as ``"PNG"``, ``".Jpg"`` or ``".gif"``.

    Returns
    -------
    str
        Normalized extension, e.g. ``".png"``.
    """
    ext = extension.strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


def is_supported(extension: str) -> bool:
    """Return ``True`` when the extension belongs to the supported registry."""
    return normalize_extension(extension) in SUPPORTED_EXTENSIONS


def format_class(extension: str) -> FormatClass:
    """Map a supported extension to the static-encoder profile class.

    Parameters
    ----------
    extension : str
        Source file extension.

    Returns
    -------
    FormatClass
        ``"lossless"`` for PNG, ``"photographic"`` for JPEG spellings and
        ``"generic"`` for everything else.
    """
    ext = normalize_extension(extension)
    if ext in LOSSLESS_EXTENSIONS:
        return "lossless"
    if ext in PHOTOGRAPHIC_EXTENSIONS:
        return "photographic"
    return "generic"


def requires_animated_path(file_path: StrPath, probe: FrameProbe | None = None) -> bool:
    """Decide whether a file must go through the animation transcoder.

    Only GIF sources are eligible, and only when the probe reports more than
    one frame. A probe failure routes the file to the transcoder so frames
    are never silently dropped.

    Parameters
    ----------
    file_path : str | PathLike
        Source image path.
    probe : FrameProbe | None, default=None
        Frame counter; defaults to the Pillow-backed probe.

    Returns
    -------
    bool
        ``True`` if the file should be transcoded as an animation.
    """
    path = Path(file_path)
    if normalize_extension(path.suffix) not in ANIMATED_CAPABLE_EXTENSIONS:
        return False

    if probe is None:
        from webp_converter.adapters.probes import PillowFrameProbe

        probe = PillowFrameProbe()

    try:
        return probe.frame_count(path) > 1
    except Exception as exc:
        logger.debug("Could not probe %s (%s); treating it as animated", path, exc)
        return True


def conversion_route(file_path: StrPath, probe: FrameProbe | None = None) -> ConversionRoute:
    """Return ``"animated"`` for transcoder-bound files, ``"static"`` otherwise."""
    return "animated" if requires_animated_path(file_path, probe=probe) else "static"


def mirrored_output_path(
    input_path: StrPath,
    source_root: StrPath,
    output_root: StrPath,
) -> Path:
    """Build the output path for a source file.

    Parameters
    ----------
    input_path : str | PathLike
        Source file located somewhere below ``source_root``.
    source_root : str | PathLike
        Pending root the relative path is computed against.
    output_root : str | PathLike
        Root of the mirrored output tree.

    Returns
    -------
    Path
        ``output_root / relative_path`` with the suffix replaced by ``.webp``.
    """
    relative = Path(input_path).relative_to(Path(source_root))
    return (Path(output_root) / relative).with_suffix(TARGET_EXTENSION)
