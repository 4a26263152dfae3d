from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(default="sqlite+pysqlite:///./diario_de_carga.db", alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_pool_timeout: float = Field(default=30.0, alias="DB_POOL_TIMEOUT")

    secret_key: str = Field(default="segredo_padrao_cleberfit", alias="SECRET_KEY")
    session_max_age: int = Field(default=60 * 60 * 24, alias="SESSION_MAX_AGE")
    bcrypt_rounds: int = Field(default=12, alias="BCRYPT_ROUNDS")

    cors_origins: List[str] = Field(default=["*"], alias="CORS_ORIGINS")
    response_format: Literal["v1", "legacy"] = Field(default="v1", alias="RESPONSE_FORMAT")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
