from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(default="sqlite:///./movie_catalog.db", alias="DATABASE_URL")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    service_name: str = Field(default="movie-catalog", alias="SERVICE_NAME")

    # Infrastructure errors are reported to clients with a generic message unless enabled
    expose_infrastructure_details: bool = Field(
        default=False, alias="EXPOSE_INFRASTRUCTURE_DETAILS"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str:
        """Upper-case the level name and fall back to INFO for empty values."""
        if not v:
            return "INFO"
        return str(v).strip().upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
