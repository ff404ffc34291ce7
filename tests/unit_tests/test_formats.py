"""Unit tests for the format registry and route classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from webp_converter import formats
from webp_converter.formats import (
    SUPPORTED_EXTENSIONS,
    conversion_route,
    format_class,
    is_supported,
    mirrored_output_path,
    requires_animated_path,
)


class _Probe:
    def __init__(self, frames: int = 1, error: Exception | None = None) -> None:
        self.frames = frames
        self.error = error
        self.calls = 0

    def frame_count(self, path: Path) -> int:
        del path
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.frames


def test_registry_has_eight_extensions() -> None:
    """Ensure the registry is the fixed set of supported sources."""
    assert len(SUPPORTED_EXTENSIONS) == 8
    assert isinstance(SUPPORTED_EXTENSIONS, frozenset)


@pytest.mark.parametrize("ext", [".png", ".PNG", "jpg", ".JpEg", ".tiff", ".bmp", ".webp", ".avif", ".gif"])
def test_supported_is_case_insensitive(ext: str) -> None:
    """Ensure lookups ignore case and a missing dot."""
    assert is_supported(ext)


@pytest.mark.parametrize("ext", [".txt", ".tif", ".heic", "", ".svg"])
def test_unsupported_extensions(ext: str) -> None:
    """Ensure unknown extensions are rejected."""
    assert not is_supported(ext)


@pytest.mark.parametrize(
    ("ext", "expected"),
    [
        (".png", "lossless"),
        (".jpg", "photographic"),
        (".JPEG", "photographic"),
        (".gif", "generic"),
        (".avif", "generic"),
    ],
)
def test_format_class(ext: str, expected: str) -> None:
    """Ensure each extension maps to its encoder profile class."""
    assert format_class(ext) == expected


def test_animated_path_only_for_multi_frame_gif() -> None:
    """Ensure only GIFs with more than one frame take the animated route."""
    assert requires_animated_path("a.gif", probe=_Probe(frames=2))
    assert not requires_animated_path("a.gif", probe=_Probe(frames=1))
    assert requires_animated_path(Path("A.GIF"), probe=_Probe(frames=3))


def test_animated_path_not_probed_for_other_formats() -> None:
    """Ensure non-GIF sources never hit the probe, even multi-page ones."""
    probe = _Probe(frames=5)
    assert not requires_animated_path("scan.tiff", probe=probe)
    assert not requires_animated_path("clip.webp", probe=probe)
    assert probe.calls == 0


def test_animated_path_on_probe_failure() -> None:
    """Ensure probe errors map to the animated route."""
    assert requires_animated_path("broken.gif", probe=_Probe(error=OSError("bad header")))
    assert requires_animated_path("broken.gif", probe=_Probe(error=ValueError("odd")))


def test_conversion_route_labels() -> None:
    """Ensure the route label follows the animated-path decision."""
    assert conversion_route("anim.gif", probe=_Probe(frames=2)) == "animated"
    assert conversion_route("still.gif", probe=_Probe(frames=1)) == "static"
    assert conversion_route("photo.jpg", probe=_Probe(frames=9)) == "static"


def test_default_probe_is_pillow(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the Pillow probe is used when none is supplied."""
    import webp_converter.adapters.probes as probes_module

    monkeypatch.setattr(probes_module.PillowFrameProbe, "frame_count", lambda self, path: 4)
    assert formats.requires_animated_path("x.gif")


def test_mirrored_output_path_nested() -> None:
    """Ensure the relative path is preserved and the suffix replaced."""
    out = mirrored_output_path(
        Path("pending/a/b/img.png"), Path("pending"), Path("output")
    )
    assert out == Path("output/a/b/img.webp")


def test_mirrored_output_path_keeps_inner_dots() -> None:
    """Ensure only the final extension is replaced."""
    out = mirrored_output_path(
        Path("pending/v1.2/photo.final.JPG"), Path("pending"), Path("output")
    )
    assert out == Path("output/v1.2/photo.final.webp")


def test_mirrored_output_path_outside_root_raises() -> None:
    """Ensure files outside the pending root are rejected."""
    with pytest.raises(ValueError):
        mirrored_output_path(Path("elsewhere/img.png"), Path("pending"), Path("output"))
