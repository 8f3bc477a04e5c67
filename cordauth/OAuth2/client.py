from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Union

from aiohttp import hdrs

from ..config import OAuth2Config
from ..errors import HTTPException, MalformedResponse
from ..scope import Scope
from .authorize import build_authorization_url
from .requests import (
    ClientCredentialsRequest,
    CodeExchangeRequest,
    RefreshTokenRequest,
    TokenRevocationRequest,
    _FormRequest,
)
from .token import ErrorResponse, TokenResponse, parse_error_response, parse_token_response

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from ..enums import ResponseType

__all__ = ("OAuth2Client",)

_log = logging.getLogger(__name__)


class OAuth2Client:
    """Sends the OAuth2 request bodies to Discord over a caller owned
    :class:`aiohttp.ClientSession`.

    The client keeps no tokens and never retries. Closing the session is up to the caller.

    Parameters
    -----------
    session: :class:`aiohttp.ClientSession`
        The session used for every request.
    config: :class:`OAuth2Config`
        The application's credentials and endpoints.
    """

    def __init__(self, session: ClientSession, config: OAuth2Config) -> None:
        self.session = session
        self.config = config

    def authorize_url(
        self,
        scopes: Sequence[Scope],
        state: Optional[str] = None,
        permissions: Optional[int] = None,
        *,
        response_type: Union[ResponseType, str] = "code",
        **kwargs,
    ) -> str:
        """Gets the OAuth2 authorization URL for the configured application

        Parameters
        -----------
        scopes: Sequence[:class:`Scope`]
            The scopes to request.
        state: Optional[:class:`str`]
            The state to include in the auth request
        permissions: Optional[:class:`int`]
            The permission bits requested for a ``bot`` scope.
        **kwargs
            Passed to :func:`build_authorization_url`.
        """
        return build_authorization_url(
            self.config.authorize_uri,
            self.config.client_id,
            self.config.redirect_uri,
            response_type,
            scopes,
            state,
            permissions,
            **kwargs,
        )

    async def _post(self, url: str, request: _FormRequest) -> bytes:
        _log.debug("POST %s (%s)", url, request.__class__.__name__)
        async with self.session.post(
            url,
            data=request.encode(),
            headers={hdrs.CONTENT_TYPE: request.content_type},
        ) as response:
            body = await response.read()
            status = response.status

        if status >= 400:
            try:
                error: Optional[ErrorResponse] = parse_error_response(body)
            except MalformedResponse:
                error = None
            _log.warning("POST %s has returned %s: %s", url, status, error.error if error else body[:200])
            raise HTTPException(status, error, body.decode("utf-8", "replace"))

        _log.debug("POST %s has returned %s", url, status)
        return body

    async def exchange_code(self, code: str) -> TokenResponse:
        """Gets an access token using an authorization code

        Parameters
        -----------
        code: :class:`str`
            The authorization code from OAuth2 redirect

        Raises
        -------
        HTTPException
            Discord rejected the exchange.
        MalformedResponse
            The success body could not be parsed.
        """
        request = CodeExchangeRequest(
            self.config.client_id,
            self.config.client_secret,
            code,
            self.config.redirect_uri,
        )
        return parse_token_response(await self._post(self.config.token_uri, request))

    async def refresh_token(self, refresh_token: str) -> TokenResponse:
        """Refreshes an access token using a refresh token

        Parameters
        -----------
        refresh_token: :class:`str`
            The refresh token to use
        """
        request = RefreshTokenRequest(self.config.client_id, self.config.client_secret, refresh_token)
        return parse_token_response(await self._post(self.config.token_uri, request))

    async def client_credentials(self, scopes: Sequence[Scope]) -> TokenResponse:
        """Gets an access token for the application owner

        Parameters
        -----------
        scopes: Sequence[:class:`Scope`]
            The scopes to request
        """
        request = ClientCredentialsRequest(self.config.client_id, self.config.client_secret, tuple(scopes))
        return parse_token_response(await self._post(self.config.token_uri, request))

    async def revoke_token(self, token: str, token_type_hint: Optional[str] = None) -> None:
        """Revokes an access token or refresh token

        Parameters
        -----------
        token: :class:`str`
            The token to revoke
        token_type_hint: Optional[:class:`str`]
            ``access_token`` or ``refresh_token``
        """
        request = TokenRevocationRequest(
            self.config.client_id,
            self.config.client_secret,
            token,
            token_type_hint,
        )
        await self._post(self.config.revoke_uri, request)
