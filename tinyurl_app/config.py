from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "TinyURL"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    database_url: str = "sqlite:///./tinyurl.db"
    db_ssl: bool = False  # TLS without certificate verification (sslmode=require)
    auto_migrate: bool = True  # Run schema migrations during startup

    # URL Shortener specific
    base_url: str = "http://localhost:3000"

    # Short code generation strategy
    short_code_strategy: str = "hex"  # Options: "hex", "random"
    short_code_bytes: int = 3  # Random bytes for hex codes (3 bytes -> 6 chars)
    short_code_length: int = 7  # Length for alphanumeric codes

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
