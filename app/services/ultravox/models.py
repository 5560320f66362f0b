"""Ultravox call models."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SessionDefaults(BaseModel):
    """Fixed provider parameters shared by every call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    model: str = "fixie-ai/ultravox"
    voice: str = "Mark"
    temperature: float = 0.3
    first_speaker: str = Field(default="FIRST_SPEAKER_AGENT", alias="firstSpeaker")
    medium: Dict[str, Dict[str, Any]] = Field(default_factory=lambda: {"twilio": {}})


class SessionConfig(SessionDefaults):
    """Request body for creating an Ultravox call."""

    system_prompt: str = Field(alias="systemPrompt")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize using the field names the Ultravox API expects."""
        return self.model_dump(by_alias=True)


class SessionHandle(BaseModel):
    """Parsed response of a successful call creation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    join_url: str = Field(alias="joinUrl")
    call_id: Optional[str] = Field(default=None, alias="callId")

    @field_validator("join_url")
    @classmethod
    def join_url_not_blank(cls, value: str) -> str:
        """Reject an empty join URL."""
        if not value.strip():
            raise ValueError("joinUrl must not be blank")
        return value
