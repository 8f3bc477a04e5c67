"""
cordauth.OAuth2.authorize
~~~~~~~~~~~~~~~~~~~~~~~~~

Builds the authorization URLs users are redirected to.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple, Union
from urllib.parse import quote, urlencode

from ..config import BASE_AUTHORIZE_URI
from ..enums import Prompt, ResponseType
from ..errors import InvalidArgument
from ..scope import Scope
from ..types.snowflake import Snowflake
from ..utils import join_scopes, require_str

__all__ = (
    "build_authorization_url",
    "AuthorizationPreset",
    "BOT_AUTHORIZATION",
    "bot_authorization_url",
    "authorization_code_grant_url",
)


def _response_type(value: Union[ResponseType, str]) -> ResponseType:
    try:
        return ResponseType(value)
    except ValueError:
        raise InvalidArgument(f"invalid response_type: {value!r}") from None


def build_authorization_url(
    base_authorize_endpoint: str,
    client_id: Union[str, int],
    redirect_uri: str,
    response_type: Union[ResponseType, str],
    scopes: Sequence[Scope],
    state: Optional[str] = None,
    permissions: Optional[int] = None,
    *,
    prompt: Optional[Union[Prompt, str]] = None,
    guild_id: Optional[Snowflake] = None,
    disable_guild_select: Optional[bool] = None,
) -> str:
    """Builds an authorization URL for the given client and scopes.

    Every value is percent encoded on its own, so the redirect URI ends up as
    a single query value and scopes are joined with ``%20``. Parameters are
    always emitted in the order ``client_id``, ``redirect_uri``,
    ``response_type``, ``scope``, ``state``, ``permissions``, ``prompt``,
    ``guild_id``, ``disable_guild_select``; optional ones only when given.

    Parameters
    -----------
    base_authorize_endpoint: :class:`str`
        The authorization page, usually :data:`~cordauth.config.BASE_AUTHORIZE_URI`.
        May already carry a query string; the parameters are appended to it.
    client_id: Union[:class:`str`, :class:`int`]
        The client ID provided by Discord
    redirect_uri: :class:`str`
        Where Discord sends the user after they authorize. Not validated.
    response_type: Union[:class:`ResponseType`, :class:`str`]
        ``code`` for the authorization code grant, ``token`` for the implicit grant.
    scopes: Sequence[:class:`Scope`]
        The scopes to request. Order and duplicates are kept.
    state: Optional[:class:`str`]
        An opaque value echoed back to the redirect URI.
    permissions: Optional[:class:`int`]
        The permission bits requested for a ``bot`` scope.
    prompt: Optional[Union[:class:`Prompt`, :class:`str`]]
        Whether to show the consent screen again.
    guild_id: Optional[:class:`int`]
        Pre-selects a guild for a ``bot`` or ``webhook.incoming`` grant.
    disable_guild_select: Optional[:class:`bool`]
        Stops the user from changing the pre-selected guild.

    Raises
    -------
    InvalidArgument
        ``client_id`` or ``redirect_uri`` is empty, or ``response_type`` is unknown.
    EmptyScopeSet
        No scopes were given.
    """
    params: Dict[str, str] = {
        "client_id": require_str("client_id", client_id),
        "redirect_uri": require_str("redirect_uri", redirect_uri),
        "response_type": _response_type(response_type).value,
        "scope": join_scopes(scopes),
    }

    if state is not None:
        params["state"] = state
    if permissions is not None:
        if isinstance(permissions, bool) or not isinstance(permissions, int) or permissions < 0:
            raise InvalidArgument(f"permissions must be a non-negative int, not {permissions!r}")
        params["permissions"] = str(permissions)
    if prompt is not None:
        try:
            params["prompt"] = Prompt(prompt).value
        except ValueError:
            raise InvalidArgument(f"invalid prompt: {prompt!r}") from None
    if guild_id is not None:
        params["guild_id"] = str(guild_id)
    if disable_guild_select is not None:
        params["disable_guild_select"] = "true" if disable_guild_select else "false"

    separator = "&" if "?" in base_authorize_endpoint else "?"
    return f"{base_authorize_endpoint}{separator}{urlencode(params, quote_via=quote)}"


@dataclass(frozen=True)
class AuthorizationPreset:
    """A fixed response type and scope set for :func:`build_authorization_url`.

    Parameters
    -----------
    response_type: :class:`ResponseType`
        The response type every URL uses.
    scopes: Tuple[:class:`Scope`, ...]
        The scopes every URL requests.
    """

    response_type: ResponseType
    scopes: Tuple[Scope, ...]

    def url(
        self,
        client_id: Union[str, int],
        redirect_uri: str,
        state: Optional[str] = None,
        permissions: Optional[int] = None,
        *,
        base_authorize_endpoint: str = BASE_AUTHORIZE_URI,
        **kwargs,
    ) -> str:
        return build_authorization_url(
            base_authorize_endpoint,
            client_id,
            redirect_uri,
            self.response_type,
            self.scopes,
            state,
            permissions,
            **kwargs,
        )


BOT_AUTHORIZATION = AuthorizationPreset(ResponseType.code, (Scope.bot,))


def bot_authorization_url(
    client_id: Union[str, int],
    redirect_uri: str,
    permissions: Optional[int] = None,
    state: Optional[str] = None,
    **kwargs,
) -> str:
    """Builds a URL that adds a bot to the guild the user selects."""
    return BOT_AUTHORIZATION.url(client_id, redirect_uri, state, permissions, **kwargs)


def authorization_code_grant_url(
    client_id: Union[str, int],
    redirect_uri: str,
    scopes: Sequence[Scope],
    state: Optional[str] = None,
    **kwargs,
) -> str:
    """Builds a URL for the authorization code grant.

    A ``state`` should always be passed and checked against the one Discord
    appends to the redirect URI, as recommended by RFC 6749.
    """
    preset = AuthorizationPreset(ResponseType.code, tuple(scopes))
    return preset.url(client_id, redirect_uri, state, **kwargs)
