"""FastAPI dependencies."""
from functools import lru_cache

from app.core.config import settings
from app.services.agent.profile import load_agent_profile
from app.services.agent.prompt import SessionConfigBuilder
from app.services.telephony.responder import CallControlResponder
from app.services.ultravox.client import UltravoxClient
from app.services.ultravox.models import SessionDefaults


@lru_cache(maxsize=1)
def get_config_builder() -> SessionConfigBuilder:
    """Get the call config builder, loaded once per process."""
    profile = load_agent_profile(settings.agent_profile_file)
    defaults = SessionDefaults(
        model=settings.ultravox_model,
        voice=settings.ultravox_voice,
        temperature=settings.ultravox_temperature,
        first_speaker=settings.ultravox_first_speaker,
    )
    return SessionConfigBuilder(base_prompt=profile.system_prompt, defaults=defaults)


def get_ultravox_client() -> UltravoxClient:
    """Get Ultravox client instance."""
    return UltravoxClient(
        api_key=settings.ultravox_api_key,
        api_url=settings.ultravox_api_url,
        timeout=settings.ultravox_timeout_seconds,
    )


def get_call_control_responder() -> CallControlResponder:
    """Get TwiML responder instance."""
    return CallControlResponder(
        stream_name=settings.twilio_stream_name,
        say_voice=settings.twilio_say_voice,
    )
