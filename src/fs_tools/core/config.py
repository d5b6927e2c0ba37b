"""Configuration management for fs-tools."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_json: bool = True
    otel_enabled: bool = False
    otel_service_name: str = "fs-tools"

    # Mode for destination directories created by copy_directory
    directory_mode: int = 0o755
    collect_copy_errors: bool = False

    model_config = {
        "env_prefix": "FS_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
