from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Mapping, Protocol

from ..core.enums import Role
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class Principal:
    """Caller identity attached to a verified request."""

    subject: str
    role: Role


class TokenVerifier(Protocol):
    """Validates bearer tokens issued by the identity provider."""

    def verify(self, token: str) -> Principal:
        raise NotImplementedError


class StaticTokenVerifier(TokenVerifier):
    """Verifier backed by a fixed token table from settings.

    Used for local development and tests, where no identity provider is reachable.
    """

    def __init__(self, tokens: Mapping[str, Principal]):
        self._tokens = dict(tokens)

    @classmethod
    def from_setting(cls, raw: str) -> "StaticTokenVerifier":
        """Build from ``"token:ROLE[:subject],token:ROLE"``."""
        tokens: dict[str, Principal] = {}
        for item in (raw or "").split(","):
            item = item.strip()
            if not item:
                continue
            parts = item.split(":")
            if len(parts) < 2:
                raise ValueError(f"Invalid API token entry: {item!r}")
            token, role = parts[0].strip(), Role(parts[1].strip().upper())
            subject = parts[2].strip() if len(parts) > 2 and parts[2].strip() else role.value.lower()
            tokens[token] = Principal(subject=subject, role=role)
        return cls(tokens)

    def verify(self, token: str) -> Principal:
        for known, principal in self._tokens.items():
            if hmac.compare_digest(known.encode(), (token or "").encode()):
                return principal
        raise AuthenticationError("Invalid or expired token")
