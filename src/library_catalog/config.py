"""Configuration management for the library catalog.

Settings come from, in order of precedence:
1. Keyword arguments
2. Environment variables prefixed with LIBRARY_CATALOG_
3. A .env file in the working directory
4. The defaults below
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConfig(BaseSettings):
    """Settings for the console catalog."""

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_file: Path = Field(
        default=Path("data/library.txt"),
        description="Catalog file, one record per line",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    seed_sample_data: bool = Field(
        default=True,
        description="Add the demo records when the loaded catalog is empty",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("data_file")
    @classmethod
    def validate_data_file(cls, v: Path) -> Path:
        """The data file must name a file, not an existing directory."""
        if v.is_dir():
            raise ValueError(f"Data file {v} is a directory")
        return v

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for the cached configuration."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the configuration used by the console entry point."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Drop the cached configuration (used by tests)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
