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
       iterable
"""
from enum import Enum
from typing import AbstractSet

from .exception import UnknownMethod
from ..common.utils import text_


class HttpMethod(Enum):
    # Asks for the response identical to GET, without the response body.
    HEAD = 'HEAD'
    GET = 'GET'
    # Submits data, included in the request body, to the identified resource.
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    # Echoes back the received request, so that a client can see
    # what intermediate servers are adding or changing.
    TRACE = 'TRACE'
    OPTIONS = 'OPTIONS'
    # Converts the connection into a transparent TCP/IP tunnel.
    CONNECT = 'CONNECT'

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, raw: str) -> 'HttpMethod':
        """Exact, case-sensitive match against the verb names."""
        try:
            return cls(text_(raw))
        except ValueError as e:
            raise UnknownMethod(raw) from e


def method_allowed(methods: AbstractSet[HttpMethod], candidate: str) -> bool:
    """Returns true if ``candidate`` names a method within ``methods``.

    Raises :exc:`UnknownMethod` when ``candidate`` is not a known verb,
    rather than treating it as not allowed."""
    return HttpMethod.parse(candidate) in methods
