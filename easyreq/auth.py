"""Credentials for basic, digest and bearer-token authentication."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Authentication:
    """A username and password, rendered as ``username:password``."""

    username: str
    password: str

    @property
    def auth_string(self) -> str:
        return f"{self.username}:{self.password}"

    def __str__(self) -> str:
        return self.auth_string


@dataclass(frozen=True)
class Digest(Authentication):
    """Credentials to be sent with digest authentication."""


@dataclass(frozen=True)
class Bearer:
    """A bearer token."""

    token: str

    def __str__(self) -> str:
        return self.token