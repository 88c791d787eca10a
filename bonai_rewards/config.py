"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "bonai-rewards"
    log_level: str = "INFO"

    # Rendering
    frame_interval_ms: float = 16.0  # ~60 fps tick while an interpolation runs
    reward_amount: int = 10

    # Entrance sequencing
    entry_stagger_ms: float = 200.0
    entry_duration_ms: float = 600.0
    entry_offset_fraction: float = 0.2

    # Expansion toggle
    expansion_duration_ms: float = 300.0

    # Reward banner
    pulse_duration_ms: float = 2000.0
    pulse_min_scale: float = 0.8
    pulse_max_scale: float = 1.2
    banner_delay_ms: float = 300.0
    banner_duration_ms: float = 800.0
    banner_start_scale: float = 0.5

    # HTTP Client
    image_timeout_seconds: float = 5.0


settings = Settings()
