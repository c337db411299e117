"""
Expense Tracker Application Configuration

Uses Pydantic Settings for automatic validation
and loading environment variables from .env file.

Principles:
1. All settings in one place
2. Automatic type validation
3. Environment variables override defaults
4. Storage is always local (SQLite file or process memory)
"""

from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings with automatic loading from environment variables

    Pydantic Settings automatically:
    - Reads .env file
    - Converts data types
    - Validates values
    - Overrides with environment variables
    """

    # === MAIN SETTINGS ===
    project_name: str = Field(default="Expense Tracker", description="Project name")
    debug: bool = Field(default=False, description="Debug mode")
    api_v1_prefix: str = Field(default="/api/v1", description="API v1 prefix")

    # === STORAGE ===
    database_url: str = Field(
        default="sqlite:///./expense_tracker.db",
        description="SQLite URL of the local preference store"
    )
    storage_backend: str = Field(
        default="sqlite",
        description="Key-value backend: sqlite or memory"
    )
    storage_key: str = Field(
        default="saved_transactions",
        description="Key under which the transaction list is persisted"
    )

    # === DISPLAY ===
    currency_symbol: str = Field(
        default="฿",
        description="Currency symbol prepended to formatted amounts"
    )

    # === CORS ===
    allowed_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed origins for CORS"
    )

    # === LOGGING ===
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("database_url")
    def validate_database_url(cls, v):
        """Validate that database URL points to a local SQLite database"""
        if not v.startswith("sqlite://"):
            raise ValueError("Database URL must start with sqlite://")
        return v

    @field_validator("storage_backend")
    def validate_storage_backend(cls, v):
        """Validate storage backend name"""
        allowed_backends = ["sqlite", "memory"]
        if v.lower() not in allowed_backends:
            raise ValueError(f"Storage backend must be one of: {allowed_backends}")
        return v.lower()

    @field_validator("storage_key")
    def validate_storage_key(cls, v):
        """Storage key must not be blank"""
        if not v.strip():
            raise ValueError("Storage key must not be empty")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate logging level"""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of: {allowed_levels}")
        return v.upper()

    class Config:
        # Read environment variables from .env file
        env_file = ".env"
        env_file_encoding = "utf-8"

        # Environment variables override default values
        case_sensitive = False


# Create a global instance of settings
# It will be automatically loaded when the module is imported
settings = Settings()


def get_cors_origins() -> List[str]:
    """Get allowed origins for CORS"""
    return settings.allowed_origins
