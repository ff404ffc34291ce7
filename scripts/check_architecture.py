#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/webp_converter"

CODEC_IMPORTS = ["import PIL", "from PIL"]
PROCESS_IMPORTS = ["import subprocess", "import shutil"]
CLI_IMPORTS = ["import typer", "from typer"]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # Core modules stay free of codecs, external tools and the CLI.
    for name in ("errors.py", "types.py", "schemas.py", "report.py", "formats.py"):
        _assert_no_imports(PACKAGE / name, CODEC_IMPORTS + PROCESS_IMPORTS + CLI_IMPORTS)

    # Use-cases talk to Pillow, cwebp and gif2webp only through adapters.
    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(
            path,
            CODEC_IMPORTS
            + PROCESS_IMPORTS
            + CLI_IMPORTS
            + ["CwebpEncoder", "PillowWebpEncoder", "resolve_cwebp", "resolve_gif2webp"],
        )

    # Adapters never reach back into use-cases or the CLI.
    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(
            path,
            CLI_IMPORTS + ["webp_converter.application", "webp_converter.cli"],
        )

    _assert_no_imports(
        PACKAGE / "cli/cli.py",
        ["from PIL import Image", *PROCESS_IMPORTS, "CwebpEncoder", "Gif2WebpTranscoder"],
    )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
