"""Pydantic models for sampledsignals settings."""

from pydantic import BaseModel, Field, field_validator

from sampledsignals.formats import SampleFormat
from sampledsignals.resamplers.enums import ResampleMethod


class ResampleOptions(BaseModel):
    """Settings for rate conversion stages."""

    method: ResampleMethod = ResampleMethod.LINEAR
    half_length: int = Field(16, ge=1, description="Polyphase filter zero crossings per side")
    kaiser_beta: float = Field(5.0, ge=0.0, description="Polyphase Kaiser window beta")
    max_denominator: int = Field(
        1_000_000, ge=1, description="Largest denominator kept when reducing the rate ratio"
    )

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, value) -> ResampleMethod:
        if isinstance(value, str):
            try:
                return ResampleMethod(value.lower())
            except ValueError:
                raise ValueError(f"Invalid resample method: {value}")
        return value


class StreamSettings(BaseModel):
    """User-editable defaults for stream copies."""

    block_size: int | None = Field(None, ge=1, description="Frames per block, None to follow the source")
    output_format: SampleFormat | None = Field(None, description="Sample format of written files")
    resample: ResampleOptions = Field(default_factory=ResampleOptions)

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, value) -> SampleFormat | None:
        if isinstance(value, str):
            try:
                return SampleFormat(value.lower())
            except ValueError:
                raise ValueError(f"Invalid sample format: {value}")
        return value
