# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
CR = '\r'
LF = '\n'
NUL = '\0'
CRLF = CR + LF
COLON = ':'
COMMA = ','
DOT = '.'
SLASH = '/'
WHITESPACE = ' '
HTTP_PROTO = 'http'
HTTP_PROTOCOL_PREFIX = HTTP_PROTO.upper() + SLASH

# A value list ends at any of these
LINE_TERMINATORS = frozenset((CR, LF, NUL))
# A single value ends at any of these
VALUE_TERMINATORS = LINE_TERMINATORS | {COMMA}
# Optional whitespace skipped before each value
OPTIONAL_WHITESPACE = frozenset((' ', '\t', '\v', '\f'))

# Maximum number of header bytes transport layers should accept.
# Not enforced by the header map or the header line parser.
HEADER_LIMIT = 10_000

# Defaults
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_MAX_HEADER_BYTES = HEADER_LIMIT
DEFAULT_INPUT = None
DEFAULT_STATUS = None
DEFAULT_METHOD = None
DEFAULT_ALLOWED_METHODS = 'HEAD,GET,POST,PUT,DELETE,TRACE,OPTIONS,CONNECT'
DEFAULT_VERSION = False
DEFAULT_ENCODING = 'utf-8'
# Wire input is decoded without ever raising, invalid bytes become U+FFFD
DEFAULT_DECODE_ERRORS = 'replace'
