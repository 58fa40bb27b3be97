from pydantic_settings import BaseSettings, SettingsConfigDict

from app.utils.enums import NotificationPolicyEnum


class BaseConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppConfig(BaseConfig):
    APP_NAME: str = "Portfolio Backend"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    CORS_ALLOWED_ORIGINS: str = (
        "https://portfolio-xi-hazel-0kejq0gg2k.vercel.app,"
        "http://localhost:5173,"
        "http://127.0.0.1:5173"
    )
    CORS_ALLOWED_ORIGIN_SUFFIXES: str = ".vercel.app"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def allowed_origin_suffixes(self) -> list[str]:
        return [
            suffix.strip()
            for suffix in self.CORS_ALLOWED_ORIGIN_SUFFIXES.split(",")
            if suffix.strip()
        ]


class DatabaseConfig(BaseConfig):
    DATABASE_URL: str | None = None
    DB_POOL_TIMEOUT: float = 10
    DB_CONNECT_TIMEOUT: float = 10
    DB_COMMAND_TIMEOUT: float = 15
    DB_CREATE_TABLES: bool = True

    def get_url(self) -> str | None:
        if not self.DATABASE_URL:
            return None

        url = self.DATABASE_URL
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+asyncpg://" + url[len(prefix):]
        return url

    def get_engine_options(self, url: str) -> dict:
        options: dict = {}
        if url.startswith("postgresql+asyncpg://"):
            options["pool_timeout"] = self.DB_POOL_TIMEOUT
            options["connect_args"] = {
                "timeout": self.DB_CONNECT_TIMEOUT,
                "command_timeout": self.DB_COMMAND_TIMEOUT,
            }
        return options


class EmailConfig(BaseConfig):
    EMAIL_API_KEY: str | None = None
    ADMIN_EMAIL: str | None = None
    EMAIL_FROM: str | None = None
    SENDER_NAME: str = "Portfolio"

    SMTP_HOST: str = "smtp.resend.com"
    SMTP_PORT: int = 465
    SMTP_USER: str = "resend"
    SMTP_USE_TLS: bool = True
    EMAIL_TIMEOUT: float = 10

    NOTIFICATION_POLICY: NotificationPolicyEnum = NotificationPolicyEnum.BEST_EFFORT

    @property
    def admin_email(self) -> str | None:
        if self.ADMIN_EMAIL and self.ADMIN_EMAIL.strip():
            return self.ADMIN_EMAIL.strip()
        return None


APP_CONFIG = AppConfig()
DB_CONFIG = DatabaseConfig()
EMAIL_CONFIG = EmailConfig()
