"""Agent profile loading."""
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)


BASE_SYSTEM_PROMPT = """YOUR NAME IS LISA and you are answering calls on behalf of Omegga AI Agency, a Canada-based company specializing in AI Automation and web development services.

Greet the caller warmly and introduce yourself as a representative of Omegga AI Agency. Ask how you can assist them today.

If they inquire about services, explain that Omegga specializes in:
- AI Automation solutions (including Voice AI)
- Web development services
- Multimodal use cases
- Customized Business Automation solutions

If asked about Pricing, explain that Omegga AI Agency operates both as a Pure AI Automation Agency and a Web Development Agency. After understanding their requirements, you will pass that information to the relevant team, and a team member will contact them within 24 hours.

Focus on:
- Understanding their Business needs
- Gathering specific requirements
- Being Professional and helpful
- Explaining Omegga AI Agency's expertise in delivering effective Business Solutions

Remember to collect their contact details for follow-up if they show interest."""


class AgentProfile(BaseModel):
    """Base behavioral script for the voice agent."""

    name: str = "Lisa"
    system_prompt: str = BASE_SYSTEM_PROMPT


def load_agent_profile(profile_file: Optional[str] = None) -> AgentProfile:
    """
    Load the agent profile.

    Falls back to the built-in profile when no file is configured or the
    configured file does not exist.
    """
    if profile_file is None:
        return AgentProfile()

    path = Path(profile_file)
    if not path.exists():
        logger.warning(
            f"[AGENT PROFILE] Profile file not found, using built-in profile - Path: {path}"
        )
        return AgentProfile()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    profile = AgentProfile(**data)
    logger.info(
        f"[AGENT PROFILE] Loaded profile '{profile.name}' from {path} "
        f"(prompt length: {len(profile.system_prompt)})"
    )
    return profile
