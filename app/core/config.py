"""Application configuration."""
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Ultravox
    ultravox_api_key: str
    ultravox_api_url: str = "https://api.ultravox.ai/api/calls"
    ultravox_timeout_seconds: float = 10.0
    ultravox_model: str = "fixie-ai/ultravox"
    ultravox_voice: str = "Mark"
    ultravox_temperature: float = 0.3
    ultravox_first_speaker: str = "FIRST_SPEAKER_AGENT"

    # Agent
    agent_profile_file: Optional[str] = None

    # Twilio
    twilio_stream_name: str = "Ultravox Stream"
    twilio_say_voice: Optional[str] = None
    disconnect_poll_interval: float = 0.5

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("ultravox_api_key")
    @classmethod
    def api_key_not_blank(cls, value: str) -> str:
        """Reject a blank API key at startup."""
        if not value.strip():
            raise ValueError("ULTRAVOX_API_KEY must not be blank")
        return value.strip()


settings = Settings()
