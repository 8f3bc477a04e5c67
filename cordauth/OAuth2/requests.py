"""
cordauth.OAuth2.requests
~~~~~~~~~~~~~~~~~~~~~~~~

Request bodies for Discord's token endpoints.

Each grant has its own type with the grant type fixed on the class, so a
refresh body can never be sent with the code exchange grant or the other
way around.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple
from urllib.parse import urlencode

from ..config import FORM_CONTENT_TYPE
from ..enums import GrantType
from ..errors import InvalidArgument
from ..scope import Scope
from ..types.oauth2 import (
    ClientCredentialsPayload,
    CodeExchangePayload,
    RefreshTokenPayload,
    RevokeTokenPayload,
)
from ..utils import join_scopes, require_str

__all__ = (
    "CodeExchangeRequest",
    "RefreshTokenRequest",
    "ClientCredentialsRequest",
    "TokenRevocationRequest",
)


class _FormRequest:
    content_type: ClassVar[str] = FORM_CONTENT_TYPE

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_form(self) -> str:
        """Returns the ``application/x-www-form-urlencoded`` body."""
        return urlencode(self.to_dict())

    def encode(self) -> bytes:
        """Returns the form body as bytes, ready to send."""
        return self.to_form().encode("ascii")

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)


@dataclass(frozen=True)
class CodeExchangeRequest(_FormRequest):
    """The body of a request exchanging an authorization code for an access token.

    Parameters
    -----------
    client_id: Union[:class:`str`, :class:`int`]
        The client ID provided by Discord
    client_secret: :class:`str`
        The client secret provided by Discord
    code: :class:`str`
        The code from the query parameters of your redirect URI.
    redirect_uri: :class:`str`
        The redirect URI used to obtain ``code``.

    Raises
    -------
    InvalidArgument
        A field is empty or not a string.
    """

    grant_type: ClassVar[GrantType] = GrantType.authorization_code

    client_id: str
    client_secret: str
    code: str
    redirect_uri: str

    def __post_init__(self) -> None:
        self._set("client_id", require_str("client_id", self.client_id))
        self._set("client_secret", require_str("client_secret", self.client_secret))
        self._set("code", require_str("code", self.code))
        self._set("redirect_uri", require_str("redirect_uri", self.redirect_uri))

    def to_dict(self) -> CodeExchangePayload:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": self.grant_type.value,
            "code": self.code,
            "redirect_uri": self.redirect_uri,
        }


@dataclass(frozen=True)
class RefreshTokenRequest(_FormRequest):
    """The body of a request exchanging a refresh token for a fresh access token.

    Parameters
    -----------
    client_id: Union[:class:`str`, :class:`int`]
        The client ID provided by Discord
    client_secret: :class:`str`
        The client secret provided by Discord
    refresh_token: :class:`str`
        The user's refresh token.
    """

    grant_type: ClassVar[GrantType] = GrantType.refresh_token

    client_id: str
    client_secret: str
    refresh_token: str

    def __post_init__(self) -> None:
        self._set("client_id", require_str("client_id", self.client_id))
        self._set("client_secret", require_str("client_secret", self.client_secret))
        self._set("refresh_token", require_str("refresh_token", self.refresh_token))

    def to_dict(self) -> RefreshTokenPayload:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": self.grant_type.value,
            "refresh_token": self.refresh_token,
        }


@dataclass(frozen=True)
class ClientCredentialsRequest(_FormRequest):
    """The body of a client credentials grant, which issues a token for the
    application's owner without a redirect.

    Parameters
    -----------
    client_id: Union[:class:`str`, :class:`int`]
        The client ID provided by Discord
    client_secret: :class:`str`
        The client secret provided by Discord
    scopes: Sequence[:class:`Scope`]
        The scopes to request. At least one is required.
    """

    grant_type: ClassVar[GrantType] = GrantType.client_credentials

    client_id: str
    client_secret: str
    scopes: Tuple[Scope, ...]

    def __post_init__(self) -> None:
        self._set("client_id", require_str("client_id", self.client_id))
        self._set("client_secret", require_str("client_secret", self.client_secret))
        scopes = tuple(self.scopes)
        join_scopes(scopes)
        self._set("scopes", scopes)

    def to_dict(self) -> ClientCredentialsPayload:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": self.grant_type.value,
            "scope": join_scopes(self.scopes),
        }


@dataclass(frozen=True)
class TokenRevocationRequest(_FormRequest):
    """The body of a request revoking an access or refresh token.

    Parameters
    -----------
    client_id: Union[:class:`str`, :class:`int`]
        The client ID provided by Discord
    client_secret: :class:`str`
        The client secret provided by Discord
    token: :class:`str`
        The token to revoke.
    token_type_hint: Optional[:class:`str`]
        Either ``access_token`` or ``refresh_token``.
    """

    client_id: str
    client_secret: str
    token: str
    token_type_hint: Optional[str] = None

    def __post_init__(self) -> None:
        self._set("client_id", require_str("client_id", self.client_id))
        self._set("client_secret", require_str("client_secret", self.client_secret))
        self._set("token", require_str("token", self.token))
        if self.token_type_hint is not None and self.token_type_hint not in ("access_token", "refresh_token"):
            raise InvalidArgument(f"invalid token_type_hint: {self.token_type_hint!r}")

    def to_dict(self) -> RevokeTokenPayload:
        payload: RevokeTokenPayload = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "token": self.token,
        }
        if self.token_type_hint is not None:
            payload["token_type_hint"] = self.token_type_hint
        return payload
