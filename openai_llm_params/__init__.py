"""Model identifiers and session parameters for OpenAI-backed LLMs."""

from openai_llm_params.config.env import load_model_parameters
from openai_llm_params.models import (
    DEFAULT_SYSTEM_PROMPT,
    KNOWN_MODEL_TYPES,
    ModelParameters,
    ModelType,
)
from openai_llm_params.services.auth_tokens import AuthToken
from openai_llm_params.services.prompts import (
    default_system_prompt,
    reset_default_system_prompt,
    set_default_system_prompt_provider,
)

__all__ = [
    "AuthToken",
    "DEFAULT_SYSTEM_PROMPT",
    "KNOWN_MODEL_TYPES",
    "ModelParameters",
    "ModelType",
    "default_system_prompt",
    "load_model_parameters",
    "reset_default_system_prompt",
    "set_default_system_prompt_provider",
]
