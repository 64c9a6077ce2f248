"""
Core Configuration Module
Central management of environment variables and application settings
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings (Pydantic Settings v2)"""

    # ==================== Application ====================
    app_title: str = "Edusaarthi Automation Service"
    app_description: str = "Scheduled document processing, AI question generation and email delivery"
    app_version: str = "1.0.0"
    app_env: str = Field(default="dev", env="APP_ENV")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_json_format: bool = Field(default=False, env="LOG_JSON_FORMAT")

    # ==================== Database (PostgreSQL) ====================
    postgres_user: str = Field(default="edusaarthi_user", env="POSTGRES_USER")
    postgres_password: str = Field(default="edusaarthi_password", env="POSTGRES_PASSWORD")
    postgres_db: str = Field(default="edusaarthi_db", env="POSTGRES_DB")
    postgres_host: str = Field(default="postgres", env="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, env="POSTGRES_PORT")
    database_url_override: Optional[str] = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="Full SQLAlchemy async URL, takes precedence over POSTGRES_*",
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy Database URL (Async)"""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # ==================== AI Providers ====================
    ai_text_provider: str = Field(default="google", env="AI_TEXT_PROVIDER")
    google_api_key: Optional[str] = Field(default=None, env="GOOGLE_API_KEY")
    ai_model_name: str = Field(default="gemini-2.5-flash", env="AI_MODEL_NAME")
    ai_temperature: float = Field(default=0.7, env="AI_TEMPERATURE")

    # ==================== Content Generation ====================
    generation_max_input_chars: int = Field(
        default=15000,
        env="GENERATION_MAX_INPUT_CHARS",
        description="Source text is truncated to this many characters before prompting",
    )
    generation_default_count: int = Field(default=5, env="GENERATION_DEFAULT_COUNT")

    # ==================== Email (SMTP) ====================
    email_user: Optional[str] = Field(default=None, env="EMAIL_USER")
    email_pass: Optional[str] = Field(default=None, env="EMAIL_PASS")
    email_from: Optional[str] = Field(default=None, env="EMAIL_FROM")
    smtp_host: str = Field(default="smtp.gmail.com", env="SMTP_HOST")
    smtp_port: int = Field(default=587, env="SMTP_PORT")
    smtp_start_tls: bool = Field(default=True, env="SMTP_START_TLS")
    smtp_timeout: float = Field(default=30.0, env="SMTP_TIMEOUT")

    # ==================== Scheduler ====================
    scheduler_enabled: bool = Field(default=True, env="SCHEDULER_ENABLED")
    scheduler_interval_seconds: float = Field(
        default=60.0,
        env="SCHEDULER_INTERVAL_SECONDS",
        description="Delay between two polls of the scheduled task queue",
    )
    scheduler_task_timeout_seconds: float = Field(
        default=600.0,
        env="SCHEDULER_TASK_TIMEOUT_SECONDS",
        description="Upper bound for a single task execution",
    )

    # ==================== Files ====================
    upload_base_path: str = Field(default=".", env="UPLOAD_BASE_PATH")

    # ==================== Pydantic Config ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Validators ====================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """APP_ENV value check"""
        allowed_envs = ["dev", "prod", "testing"]
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("scheduler_interval_seconds", "scheduler_task_timeout_seconds")
    @classmethod
    def validate_positive_seconds(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("scheduler durations must be positive")
        return v


# Singleton instance
settings = Settings()
