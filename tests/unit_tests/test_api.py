"""Unit tests for the public single-image API guards."""

from __future__ import annotations

from pathlib import Path

import pytest

from webp_converter import convert_image_to_webp
from webp_converter.errors import ConversionError, UnsupportedFormatError


def test_single_image_rejects_unsupported_extension(tmp_path: Path) -> None:
    """Ensure non-image files raise instead of returning a silent None."""
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")

    with pytest.raises(UnsupportedFormatError, match="'.txt'"):
        convert_image_to_webp(notes)

    assert not (tmp_path / "notes.webp").exists()


def test_unsupported_format_is_a_conversion_error() -> None:
    """Ensure callers catching ConversionError also see format rejections."""
    assert issubclass(UnsupportedFormatError, ConversionError)
