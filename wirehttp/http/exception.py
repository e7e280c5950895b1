# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
"""
from typing import Any, Optional


class HttpProtocolException(Exception):
    """Top level :exc:`HttpProtocolException` exception class.

    All exceptions raised by wirehttp inherit from this class, so
    client and server layers can translate any of them into a
    protocol level error response with a single except clause.
    """

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'Reason unknown')


class KeyNotFound(HttpProtocolException, KeyError):
    """Raised when a header key has no entry in a :class:`HeaderMap`."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        self.key = key
        super().__init__('%s not found in headers' % key, **kwargs)

    def __str__(self) -> str:
        # KeyError quotes its message, we don't want that.
        return str(self.args[0])


class IndexOutOfRange(HttpProtocolException, IndexError):
    """Raised when a value index exceeds the values stored for a header."""

    def __init__(self, key: Optional[str], index: int, size: int, **kwargs: Any) -> None:
        self.key = key
        self.index = index
        self.size = size
        super().__init__(
            'Index %d out of range for %s with %d value(s)' % (
                index, key if key is not None else 'header', size,
            ),
            **kwargs,
        )


class UnknownMethod(HttpProtocolException, ValueError):
    """Raised when a raw method string matches no :class:`HttpMethod`."""

    def __init__(self, method: str, **kwargs: Any) -> None:
        self.method = method
        super().__init__('Unknown HTTP method %r' % method, **kwargs)


class UnknownStatusCode(HttpProtocolException, ValueError):
    """Raised when a numeric code has no entry in the status code table."""

    def __init__(self, code: int, **kwargs: Any) -> None:
        self.code = code
        super().__init__('Unknown HTTP status code %r' % code, **kwargs)


class InvalidProtocolVersion(HttpProtocolException, ValueError):
    """Raised when a protocol token does not start with ``HTTP/``."""

    def __init__(self, protocol: str, **kwargs: Any) -> None:
        self.protocol = protocol
        super().__init__('Invalid protocol version %r' % protocol, **kwargs)


class HeaderBlockTooLarge(HttpProtocolException):
    """Raised by transport side readers when a header block exceeds
    the configured byte limit.  Never raised by the header map or
    the header line parser."""

    def __init__(self, size: int, limit: int, **kwargs: Any) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            'Header block of %d bytes exceeds limit of %d bytes' % (size, limit),
            **kwargs,
        )
