from __future__ import annotations

from typing import List, Optional

from typing_extensions import NotRequired, TypedDict

from .snowflake import Snowflake


class Token(TypedDict):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: NotRequired[str]
    scope: NotRequired[str]
    webhook: NotRequired[Webhook]
    guild: NotRequired[PartialGuild]


class TokenError(TypedDict):
    error: str
    error_description: NotRequired[str]


class CodeExchangePayload(TypedDict):
    client_id: str
    client_secret: str
    grant_type: str
    code: str
    redirect_uri: str


class RefreshTokenPayload(TypedDict):
    client_id: str
    client_secret: str
    grant_type: str
    refresh_token: str


class ClientCredentialsPayload(TypedDict):
    client_id: str
    client_secret: str
    grant_type: str
    scope: str


class RevokeTokenPayload(TypedDict):
    client_id: str
    client_secret: str
    token: str
    token_type_hint: NotRequired[str]


class Webhook(TypedDict):
    id: Snowflake
    type: int
    channel_id: Optional[Snowflake]
    guild_id: NotRequired[Optional[Snowflake]]
    name: Optional[str]
    avatar: Optional[str]
    token: NotRequired[str]
    application_id: Optional[Snowflake]
    url: NotRequired[str]


class PartialGuild(TypedDict):
    id: Snowflake
    name: str
    icon: Optional[str]
    features: List[str]
    owner_id: NotRequired[Snowflake]
    permissions: NotRequired[str]
