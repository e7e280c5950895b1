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
from enum import Enum
from typing import NamedTuple, Tuple

from .exception import InvalidProtocolVersion
from ..common.utils import text_
from ..common.constants import DOT, HTTP_PROTOCOL_PREFIX


class HttpVersion(Enum):
    """Supported protocol versions as (major, minor) pairs."""

    HTTP_1_1 = (1, 1)
    HTTP_1_0 = (1, 0)

    @property
    def major(self) -> int:
        return int(self.value[0])

    @property
    def minor(self) -> int:
        return int(self.value[1])

    @property
    def text(self) -> str:
        return '%s%d.%d' % (HTTP_PROTOCOL_PREFIX, self.major, self.minor)

    def __str__(self) -> str:
        return self.text


Protocol = NamedTuple(
    'Protocol', [
        # Protocol token as received, e.g. HTTP/1.1
        ('orig', str),
        ('major', int),
        ('minor', int),
    ],
)


def version_equals(protocol: Tuple[str, int, int], version: HttpVersion) -> bool:
    """True iff ``protocol`` carries the (major, minor) pair of ``version``.

    Plain ``(orig, major, minor)`` tuples are accepted too.  ``orig``
    is not compared."""
    _, major, minor = protocol
    return major == version.major and minor == version.minor


def _parse_natural(raw: str, start: int) -> int:
    end = start
    while end < len(raw) and raw[end] in '0123456789':
        end += 1
    return int(raw[start:end]) if end > start else 0


def parse_protocol(raw: str) -> Protocol:
    """Parses a protocol token e.g. ``HTTP/1.1`` into a :class:`Protocol`.

    The ``HTTP/`` prefix is matched case-insensitively.  Missing or
    non-numeric version parts are read as ``0``."""
    raw = text_(raw)
    prefix = len(HTTP_PROTOCOL_PREFIX)
    if raw[:prefix].upper() != HTTP_PROTOCOL_PREFIX:
        raise InvalidProtocolVersion(raw)
    major = _parse_natural(raw, prefix)
    dot = raw.find(DOT, prefix)
    minor = _parse_natural(raw, dot + 1) if dot != -1 else 0
    return Protocol(raw, major, minor)
