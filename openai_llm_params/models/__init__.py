"""Model identifiers and the parameters used to configure an OpenAI LLM."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Mapping, Optional

from openai_llm_params.services.auth_tokens import AuthToken
from openai_llm_params.services.prompts import default_system_prompt


@dataclass(frozen=True, slots=True)
class ModelType:
    """Name of a remote OpenAI model, e.g. ``"gpt-4o"``.

    Any string is accepted so newly released models work before they are
    added to the catalog below.
    """

    raw_value: str

    GPT_5: ClassVar["ModelType"]
    GPT_5_MINI: ClassVar["ModelType"]
    GPT_5_NANO: ClassVar["ModelType"]
    GPT_5_CHAT: ClassVar["ModelType"]
    GPT_4O: ClassVar["ModelType"]
    GPT_4O_MINI: ClassVar["ModelType"]
    GPT_4_TURBO: ClassVar["ModelType"]
    GPT_4_1: ClassVar["ModelType"]
    GPT_4_1_MINI: ClassVar["ModelType"]
    GPT_4_1_NANO: ClassVar["ModelType"]
    O4_MINI: ClassVar["ModelType"]
    O3: ClassVar["ModelType"]
    O3_PRO: ClassVar["ModelType"]
    O3_MINI: ClassVar["ModelType"]
    O3_MINI_HIGH: ClassVar["ModelType"]
    O1_PRO: ClassVar["ModelType"]
    O1: ClassVar["ModelType"]
    O1_MINI: ClassVar["ModelType"]
    GPT_3_5_TURBO: ClassVar["ModelType"]

    def __str__(self) -> str:
        return self.raw_value

    def encode(self) -> str:
        return self.raw_value

    @classmethod
    def decode(cls, value: str) -> "ModelType":
        return cls(value)

    def is_known(self) -> bool:
        """Whether this name is one of the catalog constants."""
        return self in _KNOWN_VALUES


# GPT-5 series
ModelType.GPT_5 = ModelType("gpt-5")
ModelType.GPT_5_MINI = ModelType("gpt-5-mini")
ModelType.GPT_5_NANO = ModelType("gpt-5-nano")
ModelType.GPT_5_CHAT = ModelType("gpt-5-chat-latest")

# GPT-4 series
ModelType.GPT_4O = ModelType("gpt-4o")
ModelType.GPT_4O_MINI = ModelType("gpt-4o-mini")
ModelType.GPT_4_TURBO = ModelType("gpt-4-turbo")
ModelType.GPT_4_1 = ModelType("gpt-4.1")
ModelType.GPT_4_1_MINI = ModelType("gpt-4.1-mini")
ModelType.GPT_4_1_NANO = ModelType("gpt-4.1-nano")

# o-series
ModelType.O4_MINI = ModelType("o4-mini")
ModelType.O3 = ModelType("o3")
ModelType.O3_PRO = ModelType("o3-pro")
ModelType.O3_MINI = ModelType("o3-mini")
ModelType.O3_MINI_HIGH = ModelType("o3-mini-high")
ModelType.O1_PRO = ModelType("o1-pro")
ModelType.O1 = ModelType("o1")
ModelType.O1_MINI = ModelType("o1-mini")

# Legacy
ModelType.GPT_3_5_TURBO = ModelType("gpt-3.5-turbo")

KNOWN_MODEL_TYPES: Mapping[str, ModelType] = MappingProxyType(
    {
        "gpt5": ModelType.GPT_5,
        "gpt5_mini": ModelType.GPT_5_MINI,
        "gpt5_nano": ModelType.GPT_5_NANO,
        "gpt5_chat": ModelType.GPT_5_CHAT,
        "gpt4o": ModelType.GPT_4O,
        "gpt4o_mini": ModelType.GPT_4O_MINI,
        "gpt4_turbo": ModelType.GPT_4_TURBO,
        "gpt4_1": ModelType.GPT_4_1,
        "gpt4_1_mini": ModelType.GPT_4_1_MINI,
        "gpt4_1_nano": ModelType.GPT_4_1_NANO,
        "o4_mini": ModelType.O4_MINI,
        "o3": ModelType.O3,
        "o3_pro": ModelType.O3_PRO,
        "o3_mini": ModelType.O3_MINI,
        "o3_mini_high": ModelType.O3_MINI_HIGH,
        "o1_pro": ModelType.O1_PRO,
        "o1": ModelType.O1,
        "o1_mini": ModelType.O1_MINI,
        "gpt3_5_turbo": ModelType.GPT_3_5_TURBO,
    }
)

_KNOWN_VALUES = frozenset(KNOWN_MODEL_TYPES.values())


class _DefaultPrompt(enum.Enum):
    DEFAULT = "default"

    def __repr__(self) -> str:
        return "<default system prompt>"


DEFAULT_SYSTEM_PROMPT = _DefaultPrompt.DEFAULT


def _default_prompts() -> tuple[str, ...]:
    return (default_system_prompt(),)


@dataclass(frozen=True)
class ModelParameters:
    """Parameters a consuming platform uses to set up an OpenAI LLM session.

    ``system_prompts`` are sent in order ahead of the conversation.
    ``model_access_test`` asks the platform to check that the model is
    reachable with the configured token before first use.
    ``overwriting_auth_token`` takes precedence over the platform's token.
    """

    model_type: str
    system_prompts: tuple[str, ...] = field(default_factory=_default_prompts)
    model_access_test: bool = False
    overwriting_auth_token: Optional[AuthToken] = None

    def __post_init__(self) -> None:
        if isinstance(self.model_type, ModelType):
            object.__setattr__(self, "model_type", self.model_type.raw_value)
        prompts = self.system_prompts
        # A bare string is one prompt, not a sequence of characters.
        if isinstance(prompts, str):
            prompts = (prompts,)
        object.__setattr__(self, "system_prompts", tuple(prompts))

    @classmethod
    def for_model(
        cls,
        model_type: ModelType | str,
        system_prompt: str | None | _DefaultPrompt = DEFAULT_SYSTEM_PROMPT,
        model_access_test: bool = False,
        overwriting_auth_token: Optional[AuthToken] = None,
    ) -> "ModelParameters":
        """Build parameters with at most one system prompt.

        Passing ``None`` as ``system_prompt`` leaves the prompts empty,
        omitting it uses the default system prompt.
        """

        if system_prompt is DEFAULT_SYSTEM_PROMPT:
            system_prompt = default_system_prompt()
        prompts: Iterable[str] = () if system_prompt is None else (system_prompt,)
        if isinstance(model_type, ModelType):
            model_type = model_type.raw_value
        return cls(
            model_type=model_type,
            system_prompts=tuple(prompts),
            model_access_test=model_access_test,
            overwriting_auth_token=overwriting_auth_token,
        )

    @property
    def model(self) -> ModelType:
        return ModelType(self.model_type)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible view of the parameters, without the auth token."""

        return {
            "model_type": self.model_type,
            "system_prompts": list(self.system_prompts),
            "model_access_test": self.model_access_test,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModelParameters":
        model_type = data.get("model_type")
        if not isinstance(model_type, str):
            raise ValueError("model_type must be a string")

        model_access_test = data.get("model_access_test", False)
        if not isinstance(model_access_test, bool):
            raise ValueError("model_access_test must be a boolean")

        if "system_prompts" not in data:
            return cls(model_type=model_type, model_access_test=model_access_test)

        prompts = data["system_prompts"]
        if not isinstance(prompts, list) or not all(
            isinstance(prompt, str) for prompt in prompts
        ):
            raise ValueError("system_prompts must be a list of strings")

        return cls(
            model_type=model_type,
            system_prompts=tuple(prompts),
            model_access_test=model_access_test,
        )


__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "KNOWN_MODEL_TYPES",
    "ModelParameters",
    "ModelType",
]
