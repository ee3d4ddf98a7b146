from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_CORS_ORIGINS = [
    f"http://{host}:{port}" for port in (3000, 5173, 8080) for host in ("localhost", "127.0.0.1")
]


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    debug: bool = False
    data_path: str = "data/posts.json"  # JSON file holding the posts collection
    admin_username: str = DEFAULT_ADMIN_USERNAME
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    session_ttl_hours: int = 24
    # Local front end dev servers; override with CAREERHUB_CORS_ORIGINS (JSON list)
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS
    # Email relay for contact form and newsletter submissions (optional)
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_use_tls: bool = True
    smtp_timeout: float = 30.0
    email_from: str | None = None
    email_to: str | None = None  # Falls back to email_from
    telegram_bot_token: str | None = None  # Telegram Bot API token for notifications (optional)
    telegram_chat_id: str | None = None

    model_config = {
        "env_file": [".env"],
        "env_prefix": "CAREERHUB_",
        "extra": "ignore",
    }

    @field_validator("admin_username", "admin_password")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("admin credentials must not be empty")
        return value

    @property
    def uses_default_credentials(self) -> bool:
        return self.admin_username == DEFAULT_ADMIN_USERNAME and self.admin_password == DEFAULT_ADMIN_PASSWORD

    @property
    def email_enabled(self) -> bool:
        return bool(self.smtp_host and self.email_from)

    @property
    def email_recipient(self) -> str | None:
        return self.email_to or self.email_from

    @property
    def telegram_enabled(self) -> bool:
        return bool(self.telegram_bot_token and self.telegram_chat_id)
