"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

FACING_MODES = ("environment", "user")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str = ""
    supabase_service_key: str = ""
    environment: str = _ENVIRONMENT
    verbose_errors: bool | None = None
    api_base_url: str = "http://127.0.0.1:8000"
    capture_delay_ms: int = 1000
    flash_ms: int = 200
    preferred_facing: str = "environment"
    environment_camera_index: int = 0
    user_camera_index: int = 1
    fallback_camera_index: int = 0
    jpeg_quality: int = 92
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def show_error_details(self) -> bool:
        """Return true when API error bodies should include the cause."""
        if self.verbose_errors is not None:
            return self.verbose_errors
        return self.environment == "local"

    def camera_indices(self) -> dict[str, int]:
        """Map facing modes to device indices."""
        return {
            "environment": self.environment_camera_index,
            "user": self.user_camera_index,
        }
