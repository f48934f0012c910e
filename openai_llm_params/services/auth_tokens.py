"""Credential values that override the platform-wide OpenAI token."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Optional

logger = logging.getLogger(__name__)

NoTokenKind = Literal["none"]
ConstantTokenKind = Literal["constant"]
CallableTokenKind = Literal["callable"]
TokenKind = NoTokenKind | ConstantTokenKind | CallableTokenKind

TokenProvider = Callable[[], Optional[str]]


@dataclass(frozen=True)
class AuthToken:
    """A token handed to the consuming platform instead of its default one.

    ``constant`` tokens carry the secret directly. ``callable`` tokens defer
    to a provider that is only invoked when the token is resolved.
    """

    kind: TokenKind = "none"
    secret: str | None = field(default=None, repr=False)
    provider: TokenProvider | None = field(default=None, repr=False)

    @classmethod
    def none(cls) -> "AuthToken":
        return cls(kind="none")

    @classmethod
    def constant(cls, secret: str) -> "AuthToken":
        return cls(kind="constant", secret=secret)

    @classmethod
    def from_callable(cls, provider: TokenProvider) -> "AuthToken":
        return cls(kind="callable", provider=provider)

    def resolve(self) -> str | None:
        """Return the secret this token stands for, if any."""

        if self.kind == "constant":
            return self.secret
        if self.kind == "callable" and self.provider is not None:
            try:
                return self.provider()
            except Exception:
                logger.exception("auth token provider failed")
                raise
        return None
