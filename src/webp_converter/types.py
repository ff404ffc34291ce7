"""Shared type aliases for converter modules."""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from typing import Literal, TypeAlias

FormatClass: TypeAlias = Literal["lossless", "photographic", "generic"]
ConversionRoute: TypeAlias = Literal["static", "animated"]
FormatCounts: TypeAlias = Mapping[str, int]
StrPath: TypeAlias = str | PathLike[str]
