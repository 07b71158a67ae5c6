from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./data/rooms_booking.db"

    SECRET_KEY: str = "secure-secret-key-1234567890"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    DEFAULT_ADMIN_PASSWORD: str = "admin123"
    DEFAULT_MAX_BOOKING_DAYS: int = 60

    LOG_LEVEL: str = "INFO"


settings = Settings()
