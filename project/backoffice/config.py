# backoffice/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_TITLE: str = "Vendor Back-Office API"
    API_PREFIX: str = "/api"

    AUTH_SECRET_KEY: str = "change-me"
    AUTH_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    AUTH_COOKIE_NAME: str = "access_token"

    # первый администратор, создаётся при старте, если админа нет
    ADMIN_LOGIN: str = "admin"
    ADMIN_PASSWORD: str = "admin"
    PASSWORD_HASH_ROUNDS: int = 535000  # sha256_crypt, минимум 1000

    CORS_ORIGINS: str = "*"             # список через запятую
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    WHATSAPP_QR_CODE: str = "dummy-qr-code"

    LOG_DIR: str = "log"
    LOG_PRINT: str = "1"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
