"""Settings loader for sampledsignals."""

import logging
from pathlib import Path

from pydantic import ValidationError

from sampledsignals.config.default_source import DefaultConfigSource
from sampledsignals.config.models import ResampleOptions, StreamSettings
from sampledsignals.config.protocols import ConfigSource
from sampledsignals.config.resolver import ConfigResolver
from sampledsignals.config.yaml_source import YAMLConfigSource
from sampledsignals.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Turn raw configuration data into validated ``StreamSettings``.

    Attributes:
        source: Where the raw data comes from
    """

    def __init__(self, source: ConfigSource | None = None) -> None:
        self.source = source or DefaultConfigSource()

    @classmethod
    def from_path(cls, config_path: Path | None = None) -> "SettingsLoader":
        """Build a loader for an explicit path or whatever the resolver finds.

        Raises:
            YAMLConfigError: If an explicit path does not exist
        """
        if config_path is not None:
            return cls(YAMLConfigSource(config_path))
        resolved = ConfigResolver().resolve()
        if resolved is None:
            return cls(DefaultConfigSource())
        return cls(YAMLConfigSource(resolved))

    def load(self) -> StreamSettings:
        """Return validated settings.

        Raises:
            ConfigValidationError: If any value fails validation
        """
        stream_data, resample_data, _ = self.source.load()
        logger.debug(f"Loading stream settings from {self.source.source_description}")
        try:
            resample = ResampleOptions(**resample_data)
            return StreamSettings(**stream_data, resample=resample)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid settings in {self.source.source_description}: {e}", errors=e
            ) from e
        except TypeError as e:
            raise ConfigValidationError(
                f"Invalid settings in {self.source.source_description}: {e}"
            ) from e
