"""OAuth2 API Wrapper for Discord

This module provides the request bodies, response models and authorization
URLs for Discord's OAuth2 API.
"""

from .authorize import (
    BOT_AUTHORIZATION,
    AuthorizationPreset,
    authorization_code_grant_url,
    bot_authorization_url,
    build_authorization_url,
)
from .client import OAuth2Client
from .requests import (
    ClientCredentialsRequest,
    CodeExchangeRequest,
    RefreshTokenRequest,
    TokenRevocationRequest,
)
from .token import ErrorResponse, TokenResponse, parse_error_response, parse_token_response

__all__ = (
    'build_authorization_url',
    'AuthorizationPreset',
    'BOT_AUTHORIZATION',
    'bot_authorization_url',
    'authorization_code_grant_url',
    'OAuth2Client',
    'CodeExchangeRequest',
    'RefreshTokenRequest',
    'ClientCredentialsRequest',
    'TokenRevocationRequest',
    'TokenResponse',
    'ErrorResponse',
    'parse_token_response',
    'parse_error_response',
)
