"""Shared test doubles for encoder, transcoder, and probe ports."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


class FakeEncoder:
    """Static encoder double writing a fixed-size payload."""

    def __init__(self, payload: bytes = b"w" * 40, fail_on: set[str] | None = None) -> None:
        self.payload = payload
        self.fail_on = fail_on or set()
        self.calls: list[tuple[Path, Path, object]] = []

    def encode(self, input_path: Path, output_path: Path, profile: object) -> None:
        self.calls.append((input_path, output_path, profile))
        if input_path.name in self.fail_on:
            raise OSError(f"cannot decode {input_path.name}")
        output_path.write_bytes(self.payload)


class FakeTranscoder:
    """Animation transcoder double."""

    def __init__(self, payload: bytes = b"a" * 30) -> None:
        self.payload = payload
        self.calls: list[tuple[Path, Path, object]] = []

    def transcode(self, input_path: Path, output_path: Path, profile: object) -> None:
        self.calls.append((input_path, output_path, profile))
        output_path.write_bytes(self.payload)


class FakeProbe:
    """Frame probe double keyed by file name."""

    def __init__(self, frames: dict[str, int] | None = None, broken: bool = False) -> None:
        self.frames = frames or {}
        self.broken = broken

    def frame_count(self, path: Path) -> int:
        if self.broken:
            raise OSError("truncated file")
        return self.frames.get(path.name, 1)


@pytest.fixture()
def encoder() -> FakeEncoder:
    """Return a fresh static encoder double."""
    return FakeEncoder()


@pytest.fixture()
def transcoder() -> FakeTranscoder:
    """Return a fresh transcoder double."""
    return FakeTranscoder()


@pytest.fixture()
def probe() -> FakeProbe:
    """Return a probe reporting single-frame images."""
    return FakeProbe()


@pytest.fixture()
def make_file() -> Callable[..., Path]:
    """Return a helper creating a file (and parents) of a given size."""

    def _make(path: Path, size: int = 100) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path

    return _make
