#!/usr/bin/env python3
"""
webp_converter.cli.cli

Typer-based CLI that converts a tree of images into a mirrored WebP tree.

Examples
--------
Convert ``to-be-converted/`` into ``converted/`` (both created on demand):

    convert-to-webp convert

Use explicit roots and a custom gif2webp binary:

    convert-to-webp convert photos/ photos-webp/ --gif2webp /opt/libwebp/bin/gif2webp
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from webp_converter.errors import ConverterError

app = typer.Typer(
    name="convert-to-webp",
    help="Convert a directory tree of images to size-optimized WebP.",
    no_args_is_help=True,
)

DEFAULT_PENDING_DIR = Path("to-be-converted")
DEFAULT_OUTPUT_DIR = Path("converted")
QUALITY_HELP = "WebP quality for PNG, GIF, TIFF, BMP, WebP and AVIF sources."
PHOTO_QUALITY_HELP = "WebP quality for JPEG sources."
EFFORT_HELP = "libwebp compression method, 0 (fast) to 6 (smallest)."


def _configure_logging(verbose: bool) -> None:
    """Route converter log records to stderr as bare messages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def _print_setup_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly setup error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or around the directory walk.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state."""
    _configure_logging(verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    pending_dir: Path = typer.Argument(
        DEFAULT_PENDING_DIR,
        envvar="WEBP_PENDING_DIR",
        file_okay=False,
        help="Directory scanned recursively for images (created if missing).",
    ),
    output_dir: Path = typer.Argument(
        DEFAULT_OUTPUT_DIR,
        envvar="WEBP_OUTPUT_DIR",
        file_okay=False,
        help="Directory that receives the mirrored .webp tree.",
    ),
    gif2webp: str | None = typer.Option(
        None,
        "--gif2webp",
        envvar="GIF2WEBP_BIN",
        help="gif2webp executable used for animated GIFs.",
    ),
    cwebp: str | None = typer.Option(
        None,
        "--cwebp",
        envvar="CWEBP_BIN",
        help="cwebp executable used for PNG and JPEG sources.",
    ),
    quality: int = typer.Option(75, "--quality", min=0, max=100, help=QUALITY_HELP),
    photo_quality: int = typer.Option(
        80, "--photo-quality", min=0, max=100, help=PHOTO_QUALITY_HELP
    ),
    effort: int = typer.Option(6, "--effort", min=0, max=6, help=EFFORT_HELP),
) -> None:
    """Convert every supported image below PENDING_DIR into OUTPUT_DIR.

    Per-file failures are reported and counted but never abort the run;
    only a failure to prepare the two root directories does.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from webp_converter.api import convert_directory_to_webp
        from webp_converter.report import format_summary

        typer.echo("Starting conversion process...\n")
        stats = convert_directory_to_webp(
            pending_dir=pending_dir,
            output_dir=output_dir,
            transcoder_bin=gif2webp,
            quality=quality,
            photo_quality=photo_quality,
            effort=effort,
            encoder_bin=cwebp,
        )
        typer.echo("")
        for line in format_summary(stats, output_dir):
            typer.echo(line)
    except ConverterError as exc:
        raise typer.Exit(code=_print_setup_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_setup_error(exc, debug))


@app.command("doctor")
def doctor_cmd(
    gif2webp: str | None = typer.Option(
        None,
        "--gif2webp",
        envvar="GIF2WEBP_BIN",
        help="gif2webp executable to look for.",
    ),
    cwebp: str | None = typer.Option(
        None,
        "--cwebp",
        envvar="CWEBP_BIN",
        help="cwebp executable to look for.",
    ),
) -> None:
    """Print installed toolchain versions and codec availability."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for distribution in ("Pillow", "pydantic", "typer"):
        try:
            typer.echo(f"{distribution}: {metadata.version(distribution)}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{distribution}: <not installed>")

    for codec in ("webp", "avif"):
        try:
            from PIL import features

            available = "yes" if features.check(codec) else "no"
        except Exception:
            available = "<unavailable>"
        typer.echo(f"{codec} codec: {available}")

    from webp_converter.adapters.encoders import resolve_cwebp, resolve_gif2webp
    from webp_converter.errors import EncoderNotFoundError, TranscoderNotFoundError

    try:
        typer.echo(f"cwebp: {resolve_cwebp(cwebp)}")
    except EncoderNotFoundError:
        typer.echo("cwebp: <not found> (PNG/JPEG fall back to Pillow settings)")

    try:
        typer.echo(f"gif2webp: {resolve_gif2webp(gif2webp)}")
    except TranscoderNotFoundError:
        typer.echo("gif2webp: <not found> (animated GIFs will fail to convert)")


if __name__ == "__main__":
    app()
