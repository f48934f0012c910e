"""Build model parameters from environment variables."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from openai_llm_params.config.llm import (
    DEFAULT_LLM_MODEL,
    ENV_API_KEY,
    ENV_MODEL,
    ENV_MODEL_ACCESS_TEST,
    ENV_SYSTEM_PROMPT,
)
from openai_llm_params.models import ModelParameters
from openai_llm_params.services.auth_tokens import AuthToken

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def load_model_parameters(
    environ: Mapping[str, str] | None = None,
) -> ModelParameters:
    """Read ``OPENAI_LLM_*`` variables into a ``ModelParameters``."""

    env = os.environ if environ is None else environ

    model = env.get(ENV_MODEL) or DEFAULT_LLM_MODEL
    model_access_test = _parse_flag(env, ENV_MODEL_ACCESS_TEST)

    api_key = env.get(ENV_API_KEY)
    token = AuthToken.constant(api_key) if api_key else None

    if ENV_SYSTEM_PROMPT in env:
        system_prompt = env[ENV_SYSTEM_PROMPT]
        parameters = ModelParameters.for_model(
            model,
            system_prompt=system_prompt or None,
            model_access_test=model_access_test,
            overwriting_auth_token=token,
        )
    else:
        parameters = ModelParameters.for_model(
            model,
            model_access_test=model_access_test,
            overwriting_auth_token=token,
        )

    logger.info(
        "loaded model parameters from environment",
        extra={
            "model_type": parameters.model_type,
            "system_prompts": len(parameters.system_prompts),
            "model_access_test": parameters.model_access_test,
            "auth_token_override": token is not None,
        },
    )
    return parameters


def _parse_flag(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name)
    if raw is None:
        return False

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value not in _FALSE_VALUES:
        logger.warning("ignoring invalid %s=%s", name, raw)
    return False
