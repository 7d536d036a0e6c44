"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookstoreSettings(BaseSettings):
    """Bookstore configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    store_name: str = Field(
        default="Quantum book store",
        description="Name shown in console output",
    )

    currency_symbol: str = Field(
        default="$",
        description="Symbol printed in front of amounts",
    )

    # Purchase defaults for the console driver
    default_email: str = Field(
        default="customer@email.com",
        description="Contact email used when none is given",
    )

    default_address: str = Field(
        default="123 Main St, City",
        description="Shipping address used when none is given",
    )

    outdated_years: int = Field(
        default=15,
        description="Age in years above which books are swept from the catalog",
        ge=0,
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="%(name)s - %(levelname)s - %(message)s",
        description="Log message format string",
    )


def get_settings() -> BookstoreSettings:
    """Get the application settings instance."""
    return BookstoreSettings()
