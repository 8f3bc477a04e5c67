# SPDX-License-Identifier: MIT

from __future__ import annotations

import datetime
from typing import Iterable, Union

from .errors import EmptyScopeSet, InvalidArgument
from .scope import Scope

__all__ = (
    "utcnow",
    "require_str",
    "join_scopes",
)


def utcnow() -> datetime.datetime:
    """A helper function to return an aware UTC datetime representing the current time.

    Returns
    --------
    :class:`datetime.datetime`
        The current aware datetime in UTC.
    """
    return datetime.datetime.now(datetime.timezone.utc)


def require_str(name: str, value: Union[str, int]) -> str:
    """Returns ``value`` as a string, refusing ``None`` and empty strings.

    Integers are accepted since Discord client IDs are snowflakes.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidArgument(f"{name} must be a str, not {value.__class__.__name__}")
    value = str(value)
    if not value:
        raise InvalidArgument(f"{name} must not be empty")
    return value


def join_scopes(scopes: Iterable[Scope]) -> str:
    """Joins scopes into Discord's space delimited form, keeping order and duplicates.

    Raises
    -------
    EmptyScopeSet
        No scopes were given.
    InvalidArgument
        An entry is not a :class:`Scope`.
    """
    parts = []
    for scope in scopes:
        if not isinstance(scope, Scope):
            raise InvalidArgument(f"expected Scope, received {scope.__class__.__name__} instead")
        parts.append(scope.to_wire())

    if not parts:
        raise EmptyScopeSet()
    return " ".join(parts)
