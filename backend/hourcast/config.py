"""Application configuration from environment variables."""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All config comes from env vars or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    UPLOAD_DIR: str = "./uploads"
    METADATA_PATH: str = "./metadata.json"
    MAX_UPLOAD_BYTES: int = 500 * 1024 * 1024
    ALLOWED_AUDIO_TYPES: str = "audio/mpeg,audio/wav,audio/ogg"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(3001, validation_alias=AliasChoices("API_PORT", "PORT"))
    CORS_ORIGINS: str = "*"

    ENVIRONMENT: str = "development"  # "development" or "production"
    FRONTEND_BUILD_DIR: str = "./client/build"
    FRONTEND_DEV_URL: str = "http://localhost:3000"

    # Reject schedule slots that name files missing from the upload dir
    STRICT_SCHEDULE_REFERENCES: bool = False

    LOG_LEVEL: str = "INFO"

    @property
    def allowed_audio_types(self) -> frozenset[str]:
        return frozenset(t.strip() for t in self.ALLOWED_AUDIO_TYPES.split(",") if t.strip())

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
