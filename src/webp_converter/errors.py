"""Exception hierarchy for WebP conversion."""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for converter errors."""

    exit_code: int = 1


class ConversionError(ConverterError):
    """Raised when a conversion request is invalid or cannot be completed."""


class UnsupportedFormatError(ConversionError):
    """Raised when a file extension is not in the supported format registry."""


class ExternalToolError(ConversionError):
    """Raised when a libwebp command-line tool exits unsuccessfully."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr


class EncoderError(ExternalToolError):
    """Raised when the ``cwebp`` static encoder fails."""


class EncoderNotFoundError(EncoderError):
    """Raised when the ``cwebp`` executable cannot be located."""


class TranscoderError(ExternalToolError):
    """Raised when the animated-image transcoder exits unsuccessfully."""


class TranscoderNotFoundError(TranscoderError):
    """Raised when the ``gif2webp`` executable cannot be located."""


class SetupError(ConverterError):
    """Raised when the pending or output root cannot be prepared."""

    exit_code = 2
