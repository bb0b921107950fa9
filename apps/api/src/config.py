# apps/api/src/config.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from services.values_store import MAX_INT64, MAX_OFFSET_DAYS


class Settings(BaseSettings):
    """
    ЕДИНЫЙ источник конфигурации mock API.

    - pydantic-settings
    - читает .env / env vars
    - дефолтные values можно переопределить на деплой
    """

    # =========================
    # APP
    # =========================
    app_name: str = Field(default="mock-cars-api", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    DEBUG: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # =========================
    # API
    # =========================
    API_HOST: str = Field(default="0.0.0.0", alias="API_HOST")
    API_PORT: int = Field(default=8081, alias="API_PORT")

    # ответы меньше этого размера не сжимаем
    gzip_min_size: int = Field(default=500, alias="GZIP_MIN_SIZE")

    # =========================
    # VALUES (start-up defaults)
    # =========================
    default_count: int = Field(default=10000, ge=0, le=MAX_INT64, alias="DEFAULT_COUNT")
    default_updated: int = Field(default=0, ge=0, le=MAX_INT64, alias="DEFAULT_UPDATED")
    default_version_days: int = Field(
        default=0, ge=0, le=MAX_OFFSET_DAYS, alias="DEFAULT_VERSION_DAYS"
    )
    default_bump_days: int = Field(
        default=1, ge=0, le=MAX_OFFSET_DAYS, alias="DEFAULT_BUMP_DAYS"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


settings = Settings()
