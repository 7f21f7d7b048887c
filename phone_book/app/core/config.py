import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values are read from the process environment and an optional `.env` file,
    falling back to the defaults below.

    Attributes:
        data_path (Path): Location of the persisted contacts file.
            Relative paths resolve against the working directory.
        log_level (str): Name of the logging level used by the command line entry point.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    data_path: Path = Field(
        default=Path("contacts.csv"),
        validation_alias="PHONE_BOOK_DATA_PATH",
    )
    log_level: str = Field(default="WARNING", validation_alias="PHONE_BOOK_LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate the log_level field.

        Args:
            v: The log level name to validate.

        Returns:
            str: The upper-cased level name.

        Raises:
            ValueError: If the value is not one of the standard logging level names.

        """
        if not isinstance(v, str):
            raise ValueError("log_level must be a string")
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    Args:
        None: This function does not take any arguments.

    Returns:
        Settings: The cached settings instance.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    Notes:
        1. Reads configuration from environment variables and the .env file.
        2. If environment variables are not set, default values are used.
        3. The instance is cached so the .env file is read only once.

    """
    return Settings()
