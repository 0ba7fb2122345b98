"""Settings for the corpus store and the engine's result limits."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from environment variables or a local ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # The engine only reads; ingestion scripts own the writes.
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/legal_corpus",
        description="Async SQLAlchemy connection URL for the corpus store",
    )

    related_case_law_limit: int = Field(
        default=5,
        ge=0,
        description="Court decisions attached to a currency check",
    )
    provision_result_limit: int = Field(
        default=200,
        ge=1,
        description="Provisions returned by a whole-document lookup",
    )


settings = Settings()
