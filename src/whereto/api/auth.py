"""Authenticated-user lookup for selection saving."""

from __future__ import annotations

from typing import Optional, Protocol

from fastapi import Request


class Authenticator(Protocol):
    def identify(self, request: Request) -> Optional[str]:
        ...


class AnonymousAuthenticator:
    """No authentication layer is wired in; every request is anonymous."""

    def identify(self, request: Request) -> Optional[str]:
        return None
