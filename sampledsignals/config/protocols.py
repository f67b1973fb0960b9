"""Protocol definitions for configuration sources."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """Protocol for configuration data sources.

    Implementations include:
    - YAMLConfigSource: Load from YAML files
    - DefaultConfigSource: Built-in Python defaults
    """

    def load(self) -> tuple[dict[str, Any], dict[str, Any], int]:
        """Load configuration data from the source.

        Returns:
            Tuple of (stream_data, resample_data, schema_version)

        Raises:
            ConfigError: If configuration cannot be loaded or is invalid
        """
        ...

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source.

        e.g. "YAML file: /path/to/sampledsignals.yaml" or "built-in defaults"
        """
        ...


# Current supported schema version
CURRENT_SCHEMA_VERSION = 1
