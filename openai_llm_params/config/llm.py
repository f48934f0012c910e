"""Defaults for the OpenAI model parameters that are tracked in Git."""

# Model used when nothing else is configured. Can be overridden via env.
DEFAULT_LLM_MODEL = "gpt-4o"

# Resource key of the default system prompt in the string table below.
SYSTEM_PROMPT_RESOURCE_KEY = "OPENAI_LLM_SYSTEM_PROMPT"

DEFAULT_PROMPT_LANGUAGE = "en"

# Stand-in for a localized resource bundle, keyed by language then by key.
PROMPT_STRINGS = {
    "en": {
        SYSTEM_PROMPT_RESOURCE_KEY: (
            "You're a helpful assistant that answers questions from users. "
            "Keep your answers accurate and concise."
        ),
    },
    "de": {
        SYSTEM_PROMPT_RESOURCE_KEY: (
            "Du bist ein hilfreicher Assistent, der Fragen von Nutzern beantwortet. "
            "Halte deine Antworten korrekt und knapp."
        ),
    },
}

# Environment variables read by ``config.env``.
ENV_MODEL = "OPENAI_LLM_MODEL"
ENV_SYSTEM_PROMPT = "OPENAI_LLM_SYSTEM_PROMPT"
ENV_MODEL_ACCESS_TEST = "OPENAI_LLM_MODEL_ACCESS_TEST"
ENV_API_KEY = "OPENAI_LLM_API_KEY"
ENV_PROMPT_LANGUAGE = "OPENAI_LLM_PROMPT_LANGUAGE"
