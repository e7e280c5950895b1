# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .main import main, entry_point
from .http import (
    HeaderMap, HeaderValues, parse_header_line, StatusCode, equals,
    is_1xx, is_2xx, is_3xx, is_4xx, is_5xx, HttpMethod, method_allowed,
    HttpVersion, Protocol, version_equals, parse_protocol,
)
from .common.constants import HEADER_LIMIT
from .common.version import __version__


__all__ = [
    # PyPi package entry_point.
    'entry_point',
    # Command line header inspector, callable with flag overrides.
    'main',
    'HeaderMap',
    'HeaderValues',
    'parse_header_line',
    'StatusCode',
    'equals',
    'is_1xx',
    'is_2xx',
    'is_3xx',
    'is_4xx',
    'is_5xx',
    'HttpMethod',
    'method_allowed',
    'HttpVersion',
    'Protocol',
    'version_equals',
    'parse_protocol',
    'HEADER_LIMIT',
    '__version__',
]
