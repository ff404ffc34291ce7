"""Pydantic schemas for encoder profiles and run configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)


class WebpEncodeProfile(BaseModel):
    """Static WebP encoder settings for one class of source formats."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    quality: int = Field(default=75, ge=0, le=100)
    method: int = Field(default=6, ge=0, le=6)
    lossless: bool = False
    near_lossless: bool = False
    smart_subsample: bool = False


class AnimatedTranscodeProfile(BaseModel):
    """Settings forwarded to the ``gif2webp`` transcoder."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    quality: int = Field(default=75, ge=0, le=100)
    method: int = Field(default=6, ge=0, le=6)
    minimize_size: bool = True
    multi_threaded: bool = True


class ConversionRunConfig(BaseModel):
    """Validated input for a whole-tree conversion run."""

    model_config = ConfigDict(extra="forbid")

    pending_dir: Path
    output_dir: Path
    transcoder_bin: str | None = None
    encoder_bin: str | None = None

    @field_validator("transcoder_bin", "encoder_bin")
    @classmethod
    def _validate_executable(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return None
        if not value.strip():
            raise ValueError(f"{info.field_name} cannot be blank.")
        return value.strip()

    @model_validator(mode="after")
    def _validate_distinct_roots(self) -> ConversionRunConfig:
        pending = self.pending_dir.resolve()
        output = self.output_dir.resolve()
        if pending == output:
            raise ValueError("pending_dir and output_dir must be different directories.")
        # Converted files written below the pending root would be walked again.
        if output.is_relative_to(pending) or pending.is_relative_to(output):
            raise ValueError("pending_dir and output_dir must not be nested in each other.")
        return self
