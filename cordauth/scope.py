"""
cordauth.scope
~~~~~~~~~~~~~~

The OAuth2 scopes Discord recognizes and their wire strings.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Dict, List

from .errors import UnknownScope

__all__ = (
    "Scope",
    "to_wire",
    "from_wire",
)


@unique
class Scope(Enum):
    """OAuth2 scopes that can be requested

    Each member maps to exactly one wire string. Members compare by identity
    and order by declaration.

    .. note::

        :attr:`bot` and :attr:`guilds_join` require a bot account linked to
        your application. To add a user to a guild the bot must already be
        a member of it.
    """

    activities_invites_write = "activities.invites.write"
    activities_read = "activities.read"
    activities_write = "activities.write"
    applications_builds_read = "applications.builds.read"
    applications_builds_upload = "applications.builds.upload"
    applications_commands = "applications.commands"
    applications_commands_update = "applications.commands.update"
    applications_commands_permissions_update = "applications.commands.permissions.update"
    applications_entitlements = "applications.entitlements"
    applications_store_update = "applications.store.update"
    bot = "bot"
    connections = "connections"
    dm_channels_read = "dm_channels.read"
    email = "email"
    gdm_join = "gdm.join"
    guilds = "guilds"
    guilds_join = "guilds.join"
    guilds_members_read = "guilds.members.read"
    identify = "identify"
    messages_read = "messages.read"
    relationships_read = "relationships.read"
    role_connections_write = "role_connections.write"
    rpc = "rpc"
    rpc_api = "rpc.api"
    rpc_activities_write = "rpc.activities.write"
    rpc_notifications_read = "rpc.notifications.read"
    rpc_voice_read = "rpc.voice.read"
    rpc_voice_write = "rpc.voice.write"
    voice = "voice"
    webhook_incoming = "webhook.incoming"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        return _ORDER[self] <= _ORDER[other]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        return _ORDER[self] > _ORDER[other]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        return _ORDER[self] >= _ORDER[other]

    def to_wire(self) -> str:
        """Returns the string Discord uses for this scope."""
        return self.value

    @classmethod
    def from_wire(cls, value: str) -> Scope:
        """Looks up the scope for a wire string.

        Raises
        -------
        UnknownScope
            ``value`` is not a scope Discord recognizes.
        """
        try:
            return _BY_WIRE[value]
        except (KeyError, TypeError):
            raise UnknownScope(value) from None

    @classmethod
    def parse_many(cls, raw: str) -> List[Scope]:
        """Splits a space delimited scope string, such as the ``scope`` field
        of a token response, into scopes. Order and duplicates are kept.

        Raises
        -------
        UnknownScope
            One of the entries is not a scope Discord recognizes.
        """
        return [cls.from_wire(part) for part in raw.split()]


_ORDER: Dict[Scope, int] = {scope: index for index, scope in enumerate(Scope)}
_BY_WIRE: Dict[str, Scope] = {scope.value: scope for scope in Scope}


def to_wire(scope: Scope) -> str:
    return scope.to_wire()


def from_wire(value: str) -> Scope:
    return Scope.from_wire(value)
