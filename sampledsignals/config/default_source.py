"""Default configuration source for sampledsignals."""

from typing import Any

from sampledsignals.config.defaults import STREAM, RESAMPLE
from sampledsignals.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide built-in default settings."""

    @property
    def source_description(self) -> str:
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], dict[str, Any], int]:
        return dict(STREAM), dict(RESAMPLE), CURRENT_SCHEMA_VERSION
