"""Centralized application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./artline.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:8000"]

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Bootstrap admin, created on startup when missing
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Media upload
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    ALLOWED_MEDIA_EXTENSIONS: List[str] = [
        "jpg", "jpeg", "png", "gif", "webp", "svg",
        "mp4", "webm", "pdf",
    ]
    UPLOAD_DIR: str = "uploads"

    # Content
    SUPPORTED_LANGUAGES: List[str] = ["ru", "kz", "en"]
    # Auto-translate fires only for saves in this language
    SOURCE_LANGUAGE: str = "ru"
    MAX_REVISIONS: int = 5
    AUTO_TRANSLATE_ENABLED: bool = True

    # AI translation provider (OpenAI compatible API)
    OPENAI_API_KEY: str = "your_openai_api_key"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    AI_TRANSLATION_MODEL: str = "gpt-4o"
    AI_DETECTION_MODEL: str = "gpt-4o"
    AI_FALLBACK_MODEL: str = "gpt-4o-mini"
    AI_TIMEOUT_SECONDS: float = 30.0
    AI_MAX_RETRIES: int = 1
    TRANSLATION_TEMPERATURE: float = 0.1
    TRANSLATION_FANOUT_TIMEOUT_SECONDS: float = 90.0

    # Contact form notifications
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    MAIL_FROM: str = "noreply@art-line.kz"
    ADMIN_EMAIL: str = ""

    def target_languages(self) -> List[str]:
        return [lang for lang in self.SUPPORTED_LANGUAGES if lang != self.SOURCE_LANGUAGE]

    def smtp_enabled(self) -> bool:
        return bool(self.SMTP_HOST)

    class Config:
        # load backend/.env regardless of the working directory
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
