"""WebP encoders implementing application ports."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from webp_converter.errors import (
    EncoderError,
    EncoderNotFoundError,
    ExternalToolError,
    TranscoderError,
    TranscoderNotFoundError,
)
from webp_converter.schemas import AnimatedTranscodeProfile, WebpEncodeProfile

logger = logging.getLogger(__name__)

CWEBP_ENV_VAR = "CWEBP_BIN"
CWEBP_DEFAULT_NAME = "cwebp"
GIF2WEBP_ENV_VAR = "GIF2WEBP_BIN"
GIF2WEBP_DEFAULT_NAME = "gif2webp"


def _resolve_tool(
    executable: str | None,
    env_var: str,
    default_name: str,
    error_cls: type[ExternalToolError],
) -> str:
    candidate = executable or os.getenv(env_var) or default_name
    resolved = shutil.which(candidate)
    if resolved is None:
        raise error_cls(
            f"{default_name} executable not found ({candidate!r}). Install libwebp tools "
            f"or set {env_var}."
        )
    return resolved


def _run_tool(command: list[str], error_cls: type[ExternalToolError]) -> None:
    logger.debug("Running %s", " ".join(command))
    result = subprocess.run(command, capture_output=True, text=True, check=False)
    if result.returncode != 0:
        stderr = result.stderr.strip() or result.stdout.strip()
        name = Path(command[0]).name
        raise error_cls(
            f"{name} exited with status {result.returncode}: {stderr}",
            stderr=stderr,
        )


def resolve_gif2webp(executable: str | None = None) -> str:
    """Locate the ``gif2webp`` executable.

    Parameters
    ----------
    executable : str | None, default=None
        Explicit executable name or path. When omitted the
        ``GIF2WEBP_BIN`` environment variable is consulted, then ``PATH``.

    Returns
    -------
    str
        Absolute path to the executable.

    Raises
    ------
    TranscoderNotFoundError
        If no executable can be found.
    """
    return _resolve_tool(
        executable, GIF2WEBP_ENV_VAR, GIF2WEBP_DEFAULT_NAME, TranscoderNotFoundError
    )


def resolve_cwebp(executable: str | None = None) -> str:
    """Locate the ``cwebp`` executable (explicit, then ``CWEBP_BIN``, then ``PATH``).

    Raises
    ------
    EncoderNotFoundError
        If no executable can be found.
    """
    return _resolve_tool(executable, CWEBP_ENV_VAR, CWEBP_DEFAULT_NAME, EncoderNotFoundError)


def needs_libwebp_cli(profile: WebpEncodeProfile) -> bool:
    """Return ``True`` when the profile uses settings only ``cwebp`` exposes."""
    return profile.near_lossless or profile.smart_subsample


class PillowWebpEncoder:
    """Encode static images to WebP with Pillow."""

    def encode(
        self,
        input_path: Path,
        output_path: Path,
        profile: WebpEncodeProfile,
    ) -> None:
        """Encode ``input_path`` into a WebP file at ``output_path``.

        Parameters
        ----------
        input_path : Path
            Source image readable by Pillow.
        output_path : Path
            Destination ``.webp`` path. Parent directory must exist.
        profile : WebpEncodeProfile
            Quality/effort settings for the source format class.

        Notes
        -----
        Pillow exposes ``quality``, ``method`` and ``lossless`` from libwebp.
        ``near_lossless`` and ``smart_subsample`` are ignored here; see
        ``CwebpEncoder``.
        """
        from PIL import Image

        with Image.open(input_path) as image:
            frame = image
            if frame.mode not in ("RGB", "RGBA"):
                has_alpha = "A" in frame.getbands() or "transparency" in frame.info
                frame = frame.convert("RGBA" if has_alpha else "RGB")
            frame.save(
                output_path,
                format="WEBP",
                quality=profile.quality,
                method=profile.method,
                lossless=profile.lossless,
            )


class CwebpEncoder:
    """Encode PNG/JPEG/TIFF/WebP sources through libwebp's ``cwebp`` tool."""

    def __init__(self, executable: str | None = None) -> None:
        self._executable = executable

    def build_command(
        self,
        executable: str,
        input_path: Path,
        output_path: Path,
        profile: WebpEncodeProfile,
    ) -> list[str]:
        """Return the argument vector for one encode call.

        ``-near_lossless`` takes the profile quality as its preprocessing
        level, and ``-sharp_yuv`` is libwebp's smart chroma subsampling.
        """
        command = [
            executable,
            "-q",
            str(profile.quality),
            "-m",
            str(profile.method),
        ]
        if profile.lossless:
            command.append("-lossless")
        if profile.near_lossless:
            command.extend(["-near_lossless", str(profile.quality)])
        if profile.smart_subsample:
            command.append("-sharp_yuv")
        command.extend([str(input_path), "-o", str(output_path)])
        return command

    def encode(
        self,
        input_path: Path,
        output_path: Path,
        profile: WebpEncodeProfile,
    ) -> None:
        """Run ``cwebp`` and raise ``EncoderError`` on failure."""
        executable = resolve_cwebp(self._executable)
        command = self.build_command(executable, input_path, output_path, profile)
        _run_tool(command, EncoderError)


class WebpStaticEncoder:
    """Static encoder that picks ``cwebp`` or Pillow per profile.

    Profiles asking for near-lossless or smart subsampling go to ``cwebp``.
    When ``cwebp`` is not installed those files are encoded by Pillow with
    the remaining settings, and a warning is logged once.
    """

    def __init__(
        self,
        executable: str | None = None,
        *,
        cwebp: CwebpEncoder | None = None,
        pillow: PillowWebpEncoder | None = None,
    ) -> None:
        self._cwebp = cwebp or CwebpEncoder(executable)
        self._pillow = pillow or PillowWebpEncoder()
        self._warned_missing_cwebp = False

    def encode(
        self,
        input_path: Path,
        output_path: Path,
        profile: WebpEncodeProfile,
    ) -> None:
        """Encode one static image with the backend the profile needs."""
        if needs_libwebp_cli(profile):
            try:
                self._cwebp.encode(input_path, output_path, profile)
                return
            except EncoderNotFoundError as exc:
                if not self._warned_missing_cwebp:
                    logger.warning("%s Falling back to Pillow without near-lossless/sharp YUV.", exc)
                    self._warned_missing_cwebp = True
        self._pillow.encode(input_path, output_path, profile)


class Gif2WebpTranscoder:
    """Transcode animated GIFs through the external ``gif2webp`` tool."""

    def __init__(self, executable: str | None = None) -> None:
        self._executable = executable

    def build_command(
        self,
        executable: str,
        input_path: Path,
        output_path: Path,
        profile: AnimatedTranscodeProfile,
    ) -> list[str]:
        """Return the argument vector for one transcode call."""
        command = [
            executable,
            str(input_path),
            "-q",
            str(profile.quality),
            "-m",
            str(profile.method),
        ]
        if profile.minimize_size:
            command.append("-min_size")
        if profile.multi_threaded:
            command.append("-mt")
        command.extend(["-o", str(output_path)])
        return command

    def transcode(
        self,
        input_path: Path,
        output_path: Path,
        profile: AnimatedTranscodeProfile,
    ) -> None:
        """Run ``gif2webp`` and raise ``TranscoderError`` on failure."""
        executable = resolve_gif2webp(self._executable)
        command = self.build_command(executable, input_path, output_path, profile)
        _run_tool(command, TranscoderError)
