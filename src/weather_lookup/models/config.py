"""Configuration models for the weather lookup client.

Defines Pydantic models for application configuration including weather API
settings, preference storage, server binding and logging options.
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from weather_lookup.constants import (
    API_KEY_PLACEHOLDER,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_UNITS,
    OWM_BASE_URL,
    VALID_UNITS,
)
from weather_lookup.exceptions import (
    ConfigFileNotFoundError,
    InvalidConfigError,
    chain_exception,
)


def _normalize_path(path: str | Path) -> Path:
    """Convert a string path to a Path object.

    Internal utility function to avoid circular imports with path_resolver.

    Args:
        path: String or Path object

    Returns:
        A Path object.
    """
    return Path(path) if isinstance(path, str) else path


class WeatherConfig(BaseModel):
    """Weather API configuration."""

    api_key: str = API_KEY_PLACEHOLDER
    base_url: str = OWM_BASE_URL
    units: str = DEFAULT_UNITS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("units")
    @classmethod
    def validate_units(cls, v: str) -> str:
        """Validate the unit system is one the API understands.

        Args:
            v: The unit system string.

        Returns:
            The validated unit system value.

        Raises:
            ValueError: If the unit system is not supported.
        """
        if v not in VALID_UNITS:
            raise ValueError(f"Units must be one of: {', '.join(VALID_UNITS)}")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove a trailing slash so endpoint paths can be appended."""
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive.

        Args:
            v: The timeout in seconds.

        Returns:
            The validated timeout value.

        Raises:
            ValueError: If the timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("Timeout must be greater than 0 seconds")
        return v

    @property
    def is_configured(self) -> bool:
        """Whether a real API key has been supplied."""
        return bool(self.api_key.strip()) and self.api_key != API_KEY_PLACEHOLDER


class StorageConfig(BaseModel):
    """Preference storage configuration."""

    path: str = ""  # Empty string means use the default from path_resolver


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = DEFAULT_SERVER_HOST
    port: int = DEFAULT_SERVER_PORT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: str | None = None
    format: str = "text"  # json or text
    max_size_mb: int = 5
    backup_count: int = 3


class AppConfig(BaseModel):
    """Main application configuration."""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file. Can be a string path
                or a Path object.

        Returns:
            An initialized AppConfig object with values from the YAML file.

        Raises:
            ConfigFileNotFoundError: If the specified config file doesn't exist.
            InvalidConfigError: If the file cannot be read, is not valid YAML, or
                its values don't match the expected schema.
        """
        import yaml

        # Use direct import to avoid circular imports
        from weather_lookup.utils.file_utils import read_text

        path = _normalize_path(config_path)
        details = {"path": str(path)}

        try:
            yaml_content = read_text(path)
        except FileNotFoundError as e:
            raise chain_exception(
                ConfigFileNotFoundError(f"Configuration file not found: {path}", details), e
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise chain_exception(
                InvalidConfigError(
                    f"Could not read configuration file: {path}", {**details, "error": str(e)}
                ),
                e,
            ) from e

        try:
            config_data = yaml.safe_load(yaml_content) or {}
            return cls.model_validate(config_data)
        except (yaml.YAMLError, ValidationError) as e:
            raise chain_exception(
                InvalidConfigError(
                    f"Invalid configuration file: {path}", {**details, "error": str(e)}
                ),
                e,
            ) from e
