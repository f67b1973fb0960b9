"""Configuration path resolution for sampledsignals."""

from pathlib import Path


# Default config file names (in order of preference)
DEFAULT_CONFIG_NAMES = [
    "sampledsignals.yaml",
    "sampledsignals.yml",
]


class ConfigResolver:
    """Resolve configuration file paths.

    Resolution order (first match wins):
    1. Explicit path provided via --config CLI option
    2. Config file in current working directory
    3. Fall back to built-in defaults (no file)
    """

    def __init__(self, explicit_path: Path | None = None) -> None:
        self.explicit_path = explicit_path

    def resolve(self) -> Path | None:
        """Resolve the configuration file path.

        Returns:
            Path to the config file, or None if using built-in defaults

        Raises:
            FileNotFoundError: If explicit_path is provided but doesn't exist
        """
        if self.explicit_path is not None:
            if not self.explicit_path.exists():
                raise FileNotFoundError(
                    f"Configuration file not found: {self.explicit_path}"
                )
            return self.explicit_path

        return self._find_in_directory(Path.cwd())

    def _find_in_directory(self, directory: Path) -> Path | None:
        for name in DEFAULT_CONFIG_NAMES:
            config_path = directory / name
            if config_path.is_file():
                return config_path
        return None

    @staticmethod
    def get_default_path() -> Path:
        """Get the default path for creating new config files."""
        return Path.cwd() / DEFAULT_CONFIG_NAMES[0]
