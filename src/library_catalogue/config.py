"""Configuration management for the library catalogue.

Settings are read from ``LIBRARY_CATALOGUE_*`` environment variables or a
``.env`` file and validated with Pydantic v2. They only affect ambient
behaviour (naming and logging); borrowing rules are fixed.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CatalogueConfig(BaseSettings):
    """Runtime settings for the catalogue and its demo harness."""

    model_config = SettingsConfigDict(
        # LIBRARY_CATALOGUE_LOG_LEVEL=DEBUG etc.
        env_prefix="LIBRARY_CATALOGUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_name: str = Field(
        default="library-catalogue",
        description="Name shown in log output of the demo harness",
        pattern=r"^[a-z0-9-]+$",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Format string passed to logging.basicConfig",
        min_length=1,
    )

    debug: bool = Field(
        default=False,
        description="Force DEBUG logging regardless of log_level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("library_name")
    @classmethod
    def validate_library_name(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Library name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Library name must not exceed 50 characters")
        return v

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        """Level actually applied once ``debug`` is taken into account."""
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogueConfig | None = None


def get_config() -> CatalogueConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogueConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Drop the cached configuration so the next ``get_config`` reloads it."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
