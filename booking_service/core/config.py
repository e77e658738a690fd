from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BOOKING_DELAY_SECONDS: float = Field(default=10.0, ge=0)
    BOOKING_ID_PROVIDER: str | None = None  # "uuid" | "sequential"; unset picks by ENV
    BOOKING_ID_PREFIX: str = "booking_"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
