"""
Content Generation

Prompt construction per output type and the LiteLLM-backed service that
produces the markdown stored in content history.
"""

from app.services.generation.client import (
    GenerationService,
    build_messages,
    get_generation_service,
)
from app.services.generation.prompts import build_system_prompt, build_user_prompt

__all__ = [
    "GenerationService",
    "build_messages",
    "build_system_prompt",
    "build_user_prompt",
    "get_generation_service",
]
