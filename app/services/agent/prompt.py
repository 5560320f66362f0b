"""Agent prompt templates."""
import re

from app.services.ultravox.models import SessionConfig, SessionDefaults

MAX_CALLER_IDENTITY_LENGTH = 64

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def escape_caller_identity(caller_number: str) -> str:
    """Strip control characters and cap the length of a caller-supplied value."""
    return _CONTROL_CHARS.sub("", caller_number).strip()[:MAX_CALLER_IDENTITY_LENGTH]


def get_caller_context(caller_number: str) -> str:
    """Generate the caller-specific context block."""
    number = escape_caller_identity(caller_number)
    return f"""IMPORTANT CONTEXT:
- The caller's phone number is: {number}
- You already have this number. If they request a callback or follow-up, you can say, "I have your number as {number}, is this the best number to reach you for a follow-up?" Get confirmation before using it. Do not just assume it's their number for follow-up.

Remember you already have their contact number, so do not ask for it again; just focus on getting other information if they show interest."""


def build_system_prompt(base_prompt: str, caller_number: str) -> str:
    """Append the caller context to the base behavioral script."""
    return f"{base_prompt}\n\n{get_caller_context(caller_number)}"


class SessionConfigBuilder:
    """Builds per-call Ultravox configurations from fixed defaults."""

    def __init__(self, base_prompt: str, defaults: SessionDefaults):
        self.base_prompt = base_prompt
        self.defaults = defaults

    def build(self, caller_number: str) -> SessionConfig:
        """Build the call configuration for one caller."""
        return SessionConfig(
            **self.defaults.model_dump(),
            system_prompt=build_system_prompt(self.base_prompt, caller_number),
        )
