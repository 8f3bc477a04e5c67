from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import MalformedResponse
from ..types.oauth2 import PartialGuild, Token, TokenError, Webhook
from .. import utils

__all__ = (
    "TokenResponse",
    "ErrorResponse",
    "parse_token_response",
    "parse_error_response",
)

_MISSING: Any = object()


def _load(body: Union[bytes, bytearray, str]) -> Dict[str, Any]:
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise MalformedResponse(f"response body is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedResponse(f"expected a JSON object, received {data.__class__.__name__} instead")
    return data


def _required(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise MalformedResponse(f"missing required field {key!r}", field=key)
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, kind):
        raise MalformedResponse(
            f"field {key!r} must be {kind.__name__}, not {value.__class__.__name__}", field=key
        )
    return value


def _optional(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise MalformedResponse(
            f"field {key!r} must be {kind.__name__}, not {value.__class__.__name__}", field=key
        )
    return value


@dataclass(frozen=True)
class TokenResponse:
    """A successful response from the token endpoint.

    Received when exchanging a code, refreshing a token or using the client
    credentials grant. Optional fields are ``None`` when Discord left them out
    and keep their value, even an empty string, when it sent them.

    Attributes
    -----------
    access_token: :class:`str`
        The user's access token.
    token_type: :class:`str`
        The type of token, usually ``Bearer``.
    expires_in: :class:`int`
        Seconds until the access token expires.
    refresh_token: Optional[:class:`str`]
        The token to use once the access token expires.
    scope: Optional[:class:`str`]
        The granted scopes, space delimited, exactly as Discord sent them.
    webhook: Optional[:class:`dict`]
        The webhook created by a ``webhook.incoming`` grant.
    guild: Optional[:class:`dict`]
        The guild a ``bot`` grant added the application to.
    """

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    webhook: Optional[Webhook] = None
    guild: Optional[PartialGuild] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TokenResponse:
        return cls(
            access_token=_required(data, "access_token", str),
            token_type=_required(data, "token_type", str),
            expires_in=_required(data, "expires_in", int),
            refresh_token=_optional(data, "refresh_token", str),
            scope=_optional(data, "scope", str),
            webhook=_optional(data, "webhook", dict),
            guild=_optional(data, "guild", dict),
        )

    def to_dict(self) -> Token:
        data: Token = {
            "access_token": self.access_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
        }
        if self.refresh_token is not None:
            data["refresh_token"] = self.refresh_token
        if self.scope is not None:
            data["scope"] = self.scope
        if self.webhook is not None:
            data["webhook"] = self.webhook
        if self.guild is not None:
            data["guild"] = self.guild
        return data

    def expires_at(self, issued_at: Optional[datetime] = None) -> datetime:
        """When the access token expires, counted from ``issued_at``
        (defaults to now in UTC)."""
        if issued_at is None:
            issued_at = utils.utcnow()
        return issued_at + timedelta(seconds=self.expires_in)

    def get_auth_header(self) -> Dict[str, str]:
        return {"Authorization": f"{self.token_type} {self.access_token}"}


def _description(data: Mapping[str, Any]) -> Optional[str]:
    # non-string descriptions are dropped, only the error code is required
    value = data.get("error_description")
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class ErrorResponse:
    """An error response from the token endpoint.

    Attributes
    -----------
    error: :class:`str`
        The error code, e.g. ``invalid_grant``.
    error_description: Optional[:class:`str`]
        A human readable description, if Discord sent one.
    """

    error: str
    error_description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ErrorResponse:
        return cls(
            error=_required(data, "error", str),
            error_description=_description(data),
        )

    def to_dict(self) -> TokenError:
        data: TokenError = {"error": self.error}
        if self.error_description is not None:
            data["error_description"] = self.error_description
        return data


def parse_token_response(body: Union[bytes, bytearray, str]) -> TokenResponse:
    """Parses the JSON body of a successful token endpoint response.

    Raises
    -------
    MalformedResponse
        The body is not a JSON object, or ``access_token``, ``token_type``
        or ``expires_in`` is missing or has the wrong type.
    """
    return TokenResponse.from_dict(_load(body))


def parse_error_response(body: Union[bytes, bytearray, str]) -> ErrorResponse:
    """Parses the JSON body of a failed token endpoint response.

    Raises
    -------
    MalformedResponse
        The body is not a JSON object or has no ``error`` field.
    """
    return ErrorResponse.from_dict(_load(body))
