"""Configuration-related exceptions for sampledsignals."""

from pydantic import ValidationError

from sampledsignals.exceptions.base import SampledSignalsError


class ConfigError(SampledSignalsError):
    """Base class for user-facing configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when user-provided stream settings fail
    validation due to incorrect data types, unknown enum names or
    constraint violations defined in the Pydantic models.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (wrong section types)
    - Unsupported schema version
    """
