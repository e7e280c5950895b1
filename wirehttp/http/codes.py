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
       teapot
"""
from enum import Enum
from typing import Dict

from .exception import UnknownStatusCode


class StatusCode(Enum):
    """Fixed table of status codes.

    Each member's value is its canonical on-wire text,
    ``"<code> <Reason-Phrase>"``, e.g. ``"404 Not Found"``.
    """

    # 1xx
    CONTINUE = '100 Continue'
    SWITCHING_PROTOCOLS = '101 Switching Protocols'
    # 2xx
    OK = '200 OK'
    CREATED = '201 Created'
    ACCEPTED = '202 Accepted'
    NON_AUTHORITATIVE_INFORMATION = '203 Non-Authoritative Information'
    NO_CONTENT = '204 No Content'
    RESET_CONTENT = '205 Reset Content'
    PARTIAL_CONTENT = '206 Partial Content'
    # 3xx
    MULTIPLE_CHOICES = '300 Multiple Choices'
    MOVED_PERMANENTLY = '301 Moved Permanently'
    FOUND = '302 Found'
    SEE_OTHER = '303 See Other'
    NOT_MODIFIED = '304 Not Modified'
    USE_PROXY = '305 Use Proxy'
    TEMPORARY_REDIRECT = '307 Temporary Redirect'
    # 4xx
    BAD_REQUEST = '400 Bad Request'
    UNAUTHORIZED = '401 Unauthorized'
    FORBIDDEN = '403 Forbidden'
    NOT_FOUND = '404 Not Found'
    METHOD_NOT_ALLOWED = '405 Method Not Allowed'
    NOT_ACCEPTABLE = '406 Not Acceptable'
    PROXY_AUTH_REQUIRED = '407 Proxy Authentication Required'
    REQUEST_TIMEOUT = '408 Request Timeout'
    CONFLICT = '409 Conflict'
    GONE = '410 Gone'
    LENGTH_REQUIRED = '411 Length Required'
    PRECONDITION_FAILED = '412 Precondition Failed'
    REQUEST_ENTITY_TOO_LARGE = '413 Request Entity Too Large'
    REQUEST_URI_TOO_LONG = '414 Request-URI Too Long'
    UNSUPPORTED_MEDIA_TYPE = '415 Unsupported Media Type'
    REQUESTED_RANGE_NOT_SATISFIABLE = '416 Requested Range Not Satisfiable'
    EXPECTATION_FAILED = '417 Expectation Failed'
    I_AM_A_TEAPOT = "418 I'm a teapot"
    MISDIRECTED_REQUEST = '421 Misdirected Request'
    UNPROCESSABLE_ENTITY = '422 Unprocessable Entity'
    UPGRADE_REQUIRED = '426 Upgrade Required'
    PRECONDITION_REQUIRED = '428 Precondition Required'
    TOO_MANY_REQUESTS = '429 Too Many Requests'
    REQUEST_HEADER_FIELDS_TOO_LARGE = '431 Request Header Fields Too Large'
    UNAVAILABLE_FOR_LEGAL_REASONS = '451 Unavailable For Legal Reasons'
    # 5xx
    INTERNAL_SERVER_ERROR = '500 Internal Server Error'
    NOT_IMPLEMENTED = '501 Not Implemented'
    BAD_GATEWAY = '502 Bad Gateway'
    SERVICE_UNAVAILABLE = '503 Service Unavailable'
    GATEWAY_TIMEOUT = '504 Gateway Timeout'
    HTTP_VERSION_NOT_SUPPORTED = '505 HTTP Version Not Supported'

    def __str__(self) -> str:
        return str(self.value)

    @property
    def code(self) -> int:
        """Numeric status code, e.g. ``404``."""
        return int(self.value[:3])

    @property
    def reason(self) -> str:
        """Reason phrase, e.g. ``Not Found``."""
        return str(self.value[4:])

    @classmethod
    def from_code(cls, code: int) -> 'StatusCode':
        try:
            return _BY_CODE[int(code)]
        except (KeyError, ValueError, TypeError) as e:
            raise UnknownStatusCode(code) from e


_BY_CODE: Dict[int, StatusCode] = {c.code: c for c in StatusCode}


def equals(raw_code: str, code: StatusCode) -> bool:
    """Case-insensitive comparison of a raw status text against the
    full canonical string of ``code``.  ``"404"`` alone never matches."""
    return raw_code.lower() == code.value.lower()


def is_1xx(code: StatusCode) -> bool:
    """Determines whether ``code`` is a 1xx status code."""
    return bool(code.value.startswith('1'))


def is_2xx(code: StatusCode) -> bool:
    """Determines whether ``code`` is a 2xx status code."""
    return bool(code.value.startswith('2'))


def is_3xx(code: StatusCode) -> bool:
    """Determines whether ``code`` is a 3xx status code."""
    return bool(code.value.startswith('3'))


def is_4xx(code: StatusCode) -> bool:
    """Determines whether ``code`` is a 4xx status code."""
    return bool(code.value.startswith('4'))


def is_5xx(code: StatusCode) -> bool:
    """Determines whether ``code`` is a 5xx status code."""
    return bool(code.value.startswith('5'))
