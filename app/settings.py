"""Application settings using Pydantic BaseSettings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "prompts" / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    service_name: str = "assistant-hub"
    service_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_allow_origins: list[str] = ["*"]

    # SendGrid (outbound notification email)
    sendgrid_api_key: str = ""
    sendgrid_from_email: str = "no-reply@example.com"
    sendgrid_from_name: str = "Assistant Hub"

    # Operator inbox for feedback and signup notifications
    feedback_recipient_email: str = "operator@example.com"
    notification_escape_html: bool = True

    # Prompt catalog
    prompt_templates_dir: Path = DEFAULT_TEMPLATES_DIR
    prompt_template_suffix: str = ".md"
    assistant_catalog_file: Path | None = None  # JSON override of the built-in table

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
