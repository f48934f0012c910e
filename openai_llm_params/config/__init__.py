"""Model and prompt defaults plus the environment variables that override them."""

from .llm import (
    DEFAULT_LLM_MODEL,
    DEFAULT_PROMPT_LANGUAGE,
    ENV_API_KEY,
    ENV_MODEL,
    ENV_MODEL_ACCESS_TEST,
    ENV_PROMPT_LANGUAGE,
    ENV_SYSTEM_PROMPT,
    PROMPT_STRINGS,
    SYSTEM_PROMPT_RESOURCE_KEY,
)

__all__ = [
    "DEFAULT_LLM_MODEL",
    "DEFAULT_PROMPT_LANGUAGE",
    "ENV_API_KEY",
    "ENV_MODEL",
    "ENV_MODEL_ACCESS_TEST",
    "ENV_PROMPT_LANGUAGE",
    "ENV_SYSTEM_PROMPT",
    "PROMPT_STRINGS",
    "SYSTEM_PROMPT_RESOURCE_KEY",
]
