from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        protected_namespaces=("settings_",),
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pymupdf"
    pdf_render_scale: float = 2.0
    pdf_jpeg_quality: int = 85

    model_provider: str = "gemini"
    model_api_key: str = ""
    model_base_url: str = ""
    primary_model_name: str = "gemini-3-pro-preview"
    fallback_model_name: str = "gemini-3-flash-preview"
    model_timeout_seconds: int = 120
    model_temperature: float = 0.0
    model_seed: int = 42
    model_max_attempts: int = 3
    model_backoff_base_seconds: float = 1.5
    model_backoff_jitter_seconds: float = 1.0

    storage_backend: str = "simulated"
    storage_delay_seconds: float = 1.5

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "pid_digitizer"
    db_username: str = "pid_digitizer"
    db_password: str = "secret"

    auth_delay_seconds: float = 1.0
