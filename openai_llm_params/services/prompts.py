"""Lookup and caching of the default system prompt."""

from __future__ import annotations

import logging
import os
import threading
from typing import Callable, Optional

from openai_llm_params.config.llm import (
    DEFAULT_PROMPT_LANGUAGE,
    ENV_PROMPT_LANGUAGE,
    PROMPT_STRINGS,
    SYSTEM_PROMPT_RESOURCE_KEY,
)

logger = logging.getLogger(__name__)

PromptProvider = Callable[[], str]


def localized_string(key: str, language: str | None = None) -> str:
    """Return the string for ``key``, falling back to English and then the key."""

    lang = language or os.environ.get(ENV_PROMPT_LANGUAGE) or DEFAULT_PROMPT_LANGUAGE
    strings = PROMPT_STRINGS.get(lang)
    if strings is None:
        logger.warning(
            "no prompt strings for language %r; using %r",
            lang,
            DEFAULT_PROMPT_LANGUAGE,
        )
        strings = PROMPT_STRINGS[DEFAULT_PROMPT_LANGUAGE]

    value = strings.get(key)
    if value is None:
        value = PROMPT_STRINGS[DEFAULT_PROMPT_LANGUAGE].get(key, key)
    return value


def localized_system_prompt() -> str:
    return localized_string(SYSTEM_PROMPT_RESOURCE_KEY)


_lock = threading.Lock()
_provider: PromptProvider = localized_system_prompt
_cached: Optional[str] = None


def default_system_prompt() -> str:
    """Resolve the default system prompt once and reuse it afterwards."""

    global _cached
    with _lock:
        if _cached is None:
            _cached = _provider()
            logger.debug(
                "resolved default system prompt",
                extra={"length": len(_cached)},
            )
        return _cached


def set_default_system_prompt_provider(provider: PromptProvider) -> None:
    """Replace the provider and forget any previously resolved prompt."""

    global _provider, _cached
    with _lock:
        _provider = provider
        _cached = None


def reset_default_system_prompt() -> None:
    """Restore the built-in localized provider."""

    set_default_system_prompt_provider(localized_system_prompt)
