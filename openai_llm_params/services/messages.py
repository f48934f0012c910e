"""Render model parameters into OpenAI Responses API input items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from openai.types.responses import ResponseInputParam

if TYPE_CHECKING:
    from openai_llm_params.models import ModelParameters


def system_input(parameters: "ModelParameters") -> ResponseInputParam:
    """Build the leading system turns, one per configured system prompt."""

    content: ResponseInputParam = []
    for prompt in parameters.system_prompts:
        content.append(
            {
                "role": "system",
                "content": [
                    {
                        "type": "input_text",
                        "text": prompt,
                    }
                ],
            }
        )
    return content


def with_user_text(
    parameters: "ModelParameters", user_text: str
) -> ResponseInputParam:
    """System turns followed by a single user text turn."""

    content = system_input(parameters)
    content.append(
        {
            "role": "user",
            "content": [
                {"type": "input_text", "text": user_text},
            ],
        }
    )
    return content
