"""
cordauth.config
~~~~~~~~~~~~~~~

Discord OAuth2 endpoints and application credentials.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .errors import InvalidArgument

__all__ = (
    "BASE_AUTHORIZE_URI",
    "BASE_TOKEN_URI",
    "BASE_REVOKE_URI",
    "FORM_CONTENT_TYPE",
    "OAuth2Config",
)

BASE_AUTHORIZE_URI = "https://discord.com/oauth2/authorize"
BASE_TOKEN_URI = "https://discord.com/api/oauth2/token"
BASE_REVOKE_URI = "https://discord.com/api/oauth2/token/revoke"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class OAuth2Config:
    """The credentials and endpoints of a Discord application.

    Parameters
    -----------
    client_id: :class:`str`
        The client ID provided by Discord
    client_secret: :class:`str`
        The client secret provided by Discord
    redirect_uri: :class:`str`
        The redirect URI registered for the OAuth2 flow
    authorize_uri: :class:`str`
        The authorization page users are sent to.
    token_uri: :class:`str`
        The endpoint used for code exchange and token refresh.
    revoke_uri: :class:`str`
        The endpoint used to revoke tokens.
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    authorize_uri: str = BASE_AUTHORIZE_URI
    token_uri: str = BASE_TOKEN_URI
    revoke_uri: str = BASE_REVOKE_URI

    @classmethod
    def from_env(cls, path: Optional[Union[str, os.PathLike]] = None) -> OAuth2Config:
        """Loads the configuration from the environment, reading a ``.env``
        file first if one exists.

        Reads ``DISCORD_CLIENT_ID``, ``DISCORD_CLIENT_SECRET`` and
        ``DISCORD_REDIRECT_URI``. The endpoints can be overridden with
        ``DISCORD_AUTHORIZE_URI``, ``DISCORD_TOKEN_URI`` and ``DISCORD_REVOKE_URI``.

        Raises
        -------
        InvalidArgument
            A required variable is missing or empty.
        """
        load_dotenv(path if path is not None else find_dotenv(usecwd=True))

        values = {}
        for name in ("client_id", "client_secret", "redirect_uri"):
            key = f"DISCORD_{name.upper()}"
            value = os.environ.get(key)
            if not value:
                raise InvalidArgument(f"environment variable {key} is not set")
            values[name] = value

        return cls(
            authorize_uri=os.environ.get("DISCORD_AUTHORIZE_URI", BASE_AUTHORIZE_URI),
            token_uri=os.environ.get("DISCORD_TOKEN_URI", BASE_TOKEN_URI),
            revoke_uri=os.environ.get("DISCORD_REVOKE_URI", BASE_REVOKE_URI),
            **values,
        )
