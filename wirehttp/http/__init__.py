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
       Submodules
"""
from .codes import StatusCode, equals, is_1xx, is_2xx, is_3xx, is_4xx, is_5xx
from .headers import HeaderMap, HeaderValues
from .methods import HttpMethod, method_allowed
from .parser import parse_header_line
from .versions import HttpVersion, Protocol, version_equals, parse_protocol
from .exception import (
    HttpProtocolException, KeyNotFound, IndexOutOfRange, UnknownMethod,
    UnknownStatusCode, InvalidProtocolVersion, HeaderBlockTooLarge,
)


__all__ = [
    'StatusCode',
    'equals',
    'is_1xx',
    'is_2xx',
    'is_3xx',
    'is_4xx',
    'is_5xx',
    'HeaderMap',
    'HeaderValues',
    'HttpMethod',
    'method_allowed',
    'parse_header_line',
    'HttpVersion',
    'Protocol',
    'version_equals',
    'parse_protocol',
    'HttpProtocolException',
    'KeyNotFound',
    'IndexOutOfRange',
    'UnknownMethod',
    'UnknownStatusCode',
    'InvalidProtocolVersion',
    'HeaderBlockTooLarge',
]
