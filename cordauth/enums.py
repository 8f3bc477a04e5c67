# SPDX-License-Identifier: MIT

from __future__ import annotations

from enum import Enum

__all__ = (
    "ResponseType",
    "GrantType",
    "Prompt",
)


class ResponseType(str, Enum):
    code = "code"
    token = "token"

    def __str__(self) -> str:
        return self.value


class GrantType(str, Enum):
    authorization_code = "authorization_code"
    refresh_token = "refresh_token"
    client_credentials = "client_credentials"

    def __str__(self) -> str:
        return self.value


class Prompt(str, Enum):
    """Controls whether Discord shows the consent screen again for an
    already authorized application."""

    consent = "consent"
    none = "none"

    def __str__(self) -> str:
        return self.value
