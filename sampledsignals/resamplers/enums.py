"""Resampling method enums for sampledsignals."""

from enum import Enum


class ResampleMethod(str, Enum):
    """Selectable interpolation strategies for rate conversion."""

    LINEAR = "linear"
    POLYPHASE = "polyphase"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value
