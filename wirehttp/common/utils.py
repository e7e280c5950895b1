# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       utils
"""
from typing import Any, Iterable, Tuple

from .constants import COLON, CRLF, WHITESPACE, DEFAULT_ENCODING


def text_(s: Any, encoding: str = DEFAULT_ENCODING, errors: str = 'strict') -> Any:
    """Utility to ensure text-like usability.

    If s is of type bytes or int, return s.decode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        return str(s)
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s).decode(encoding, errors)
    return s


def build_http_header(k: str, v: str) -> str:
    """Build and returns a HTTP header line for use in raw packet."""
    return text_(k) + COLON + WHITESPACE + text_(v)


def build_http_headers(pairs: Iterable[Tuple[str, str]]) -> str:
    """Joins header lines with CRLF.  The trailing blank line that
    terminates a header block is left to the caller."""
    return CRLF.join(build_http_header(k, v) for k, v in pairs)
