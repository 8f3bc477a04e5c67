"""
cordauth.errors
~~~~~~~~~~~~~~~

Exceptions raised while building OAuth2 requests or reading responses.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .OAuth2.token import ErrorResponse

__all__ = (
    "OAuth2Exception",
    "InvalidArgument",
    "EmptyScopeSet",
    "UnknownScope",
    "MalformedResponse",
    "HTTPException",
)


class OAuth2Exception(Exception):
    """Base exception class for cordauth

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    pass


class InvalidArgument(OAuth2Exception, ValueError):
    """Exception that's raised when an argument to a builder or request model
    is invalid, e.g. an empty client secret.
    """

    pass


class EmptyScopeSet(InvalidArgument):
    """Exception that's raised when a URL or request is built without any scopes."""

    def __init__(self, message: str = "at least one scope is required") -> None:
        super().__init__(message)


class UnknownScope(OAuth2Exception, ValueError):
    """Exception that's raised when a string does not name any known :class:`Scope`.

    Attributes
    ------------
    value: :class:`str`
        The string that failed to match.
    """

    def __init__(self, value: str) -> None:
        self.value: str = value
        super().__init__(f"unknown OAuth2 scope: {value!r}")


class MalformedResponse(OAuth2Exception):
    """Exception that's raised when a response body is missing a required
    field or a field has the wrong shape.

    Attributes
    ------------
    field: Optional[:class:`str`]
        The offending field, if the problem is tied to one.
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        self.field: Optional[str] = field
        super().__init__(message)


class HTTPException(OAuth2Exception):
    """Exception that's raised when the token endpoint answers with an error status.

    Attributes
    ------------
    status: :class:`int`
        The status code of the HTTP request.
    response: Optional[:class:`ErrorResponse`]
        The parsed error body, or ``None`` if it could not be parsed.
    text: :class:`str`
        The raw response body.
    """

    def __init__(self, status: int, response: Optional[ErrorResponse], text: Any = "") -> None:
        self.status: int = status
        self.response: Optional[ErrorResponse] = response
        self.text: str = text if isinstance(text, str) else repr(text)

        fmt = "{0} (error: {1})"
        if response is not None:
            message = response.error
            if response.error_description:
                message = f"{message}: {response.error_description}"
        else:
            message = self.text
        super().__init__(fmt.format(status, message))
