"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from webp_converter.schemas import AnimatedTranscodeProfile, WebpEncodeProfile
from webp_converter.types import FormatClass

LOSSLESS_PROFILE = WebpEncodeProfile(
    quality=75,
    method=6,
    near_lossless=True,
    smart_subsample=True,
)
PHOTOGRAPHIC_PROFILE = WebpEncodeProfile(quality=80, method=6, smart_subsample=True)
GENERIC_PROFILE = WebpEncodeProfile(quality=75, method=6)
ANIMATED_PROFILE = AnimatedTranscodeProfile(
    quality=75,
    method=6,
    minimize_size=True,
    multi_threaded=True,
)


@dataclass(frozen=True)
class ConversionOptions:
    """Encoder profiles used by the single-file converter."""

    lossless: WebpEncodeProfile = LOSSLESS_PROFILE
    photographic: WebpEncodeProfile = PHOTOGRAPHIC_PROFILE
    generic: WebpEncodeProfile = GENERIC_PROFILE
    animated: AnimatedTranscodeProfile = ANIMATED_PROFILE

    def static_profile(self, kind: FormatClass) -> WebpEncodeProfile:
        """Return the static profile for a format class."""
        if kind == "lossless":
            return self.lossless
        if kind == "photographic":
            return self.photographic
        return self.generic
