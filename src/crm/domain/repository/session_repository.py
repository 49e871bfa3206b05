"""Abstractions around authentication.

``AuthGateway`` exchanges credentials for a bearer token;
``SessionRepository`` remembers that token between invocations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthGateway(ABC):

    @abstractmethod
    def login(self, username: str, password: str) -> str:
        """Return a bearer token, or raise AuthenticationError."""


class SessionRepository(ABC):

    @abstractmethod
    def load_token(self) -> str | None:
        """Return the stored token, or None when logged out."""

    @abstractmethod
    def save_token(self, token: str) -> None:
        """Remember the token for later invocations."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored token."""
