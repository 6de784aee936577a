"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
Both services (auth and hydration) read the same settings, so the
token secret and database location are shared between them.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Hydration Tracking"
    VERSION: str = "1.0.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "hydration_tracking"
    DATABASE_SSL_MODE: str = "disable"

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Hydration
    DEFAULT_DAILY_GOAL: int = 2000

    # Services
    AUTH_PORT: int = 8081
    HYDRATION_PORT: int = 8082

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}?sslmode={self.DATABASE_SSL_MODE}")


# Global settings instance
settings = Settings()
