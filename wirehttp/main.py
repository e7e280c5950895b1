# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       stdin
       stderr
"""
import sys
import logging

from typing import Any, BinaryIO, List, Optional

from .http.codes import StatusCode, is_1xx, is_2xx, is_3xx, is_4xx, is_5xx
from .http.headers import HeaderMap
from .http.methods import HttpMethod, method_allowed
from .http.parser import parse_header_line
from .http.versions import parse_protocol
from .http.exception import HeaderBlockTooLarge, HttpProtocolException, UnknownMethod
from .common.flag import FlagParser, flags
from .common.utils import build_http_header, text_
from .common.constants import (
    CR, LF, WHITESPACE, HTTP_PROTOCOL_PREFIX, DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT, DEFAULT_MAX_HEADER_BYTES,
    DEFAULT_INPUT, DEFAULT_STATUS, DEFAULT_METHOD, DEFAULT_ALLOWED_METHODS,
    DEFAULT_VERSION, DEFAULT_DECODE_ERRORS,
)

logger = logging.getLogger(__name__)


flags.add_argument(
    '--version',
    '-v',
    action='store_true',
    default=DEFAULT_VERSION,
    help='Prints wirehttp version.',
)

flags.add_argument(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Valid options: DEBUG, INFO (default), WARNING, ERROR, CRITICAL. '
    'Both upper and lowercase values are allowed. '
    'You may also simply use the leading character e.g. --log-level d',
)

flags.add_argument(
    '--log-file',
    type=str,
    default=DEFAULT_LOG_FILE,
    help='Default: sys.stdout. Log file destination.',
)

flags.add_argument(
    '--log-format',
    type=str,
    default=DEFAULT_LOG_FORMAT,
    help='Log format for Python logger.',
)

flags.add_argument(
    '--max-header-bytes',
    type=int,
    default=DEFAULT_MAX_HEADER_BYTES,
    help='Default: ' + str(DEFAULT_MAX_HEADER_BYTES) + '.  ' +
    'Header blocks larger than this are rejected.',
)

flags.add_argument(
    '--input',
    type=str,
    default=DEFAULT_INPUT,
    help='Default: stdin.  File to read a raw header block from.  ' +
    'Reading stops at the first blank line.',
)

flags.add_argument(
    '--status',
    type=int,
    default=DEFAULT_STATUS,
    help='Default: None.  Prints canonical text and class of a status code.',
)

flags.add_argument(
    '--method',
    type=str,
    default=DEFAULT_METHOD,
    help='Default: None.  Checks whether method is within --allowed-methods.',
)

flags.add_argument(
    '--allowed-methods',
    type=str,
    default=DEFAULT_ALLOWED_METHODS,
    help='Default: ' + DEFAULT_ALLOWED_METHODS + '.  ' +
    'Comma separated list of allowed methods.',
)


STATUS_CLASSES = (
    ('1xx', is_1xx),
    ('2xx', is_2xx),
    ('3xx', is_3xx),
    ('4xx', is_4xx),
    ('5xx', is_5xx),
)


def status_class(code: StatusCode) -> str:
    for name, predicate in STATUS_CLASSES:
        if predicate(code):
            return name
    raise AssertionError('Unclassified status code %s' % code)  # pragma: no cover


def read_header_block(
        stream: BinaryIO,
        max_header_bytes: int = DEFAULT_MAX_HEADER_BYTES,
) -> List[str]:
    """Reads lines up to the first blank line, without line terminators.

    Never reads more than ``max_header_bytes + 1`` bytes from ``stream``,
    even when no line terminator arrives.  Raises
    :exc:`HeaderBlockTooLarge` once more than ``max_header_bytes`` bytes
    have been consumed.  Undecodable bytes become U+FFFD."""
    lines: List[str] = []
    total = 0
    while True:
        raw = stream.readline(max_header_bytes - total + 1)
        if not raw:
            break
        total += len(raw)
        if total > max_header_bytes:
            raise HeaderBlockTooLarge(total, max_header_bytes)
        line = text_(raw, errors=DEFAULT_DECODE_ERRORS).rstrip(CR + LF)
        if line == '':
            break
        lines.append(line)
    return lines


def parse_header_block(lines: List[str]) -> HeaderMap:
    """Builds a :class:`HeaderMap` from raw header lines.

    Repeated headers accumulate their values.  A header line without
    values keeps its key with an empty value list."""
    headers = HeaderMap()
    for line in lines:
        key, values = parse_header_line(line)
        if not values:
            if not headers.has_key(key):
                headers.set(key, [])
            continue
        for value in values:
            headers.add(key, value)
    logger.debug('Parsed %d header line(s) into %d key(s)', len(lines), len(headers))
    return headers


def describe_status_line(line: str) -> List[str]:
    parts = line.split(WHITESPACE, 2)
    protocol = parse_protocol(parts[0])
    out = ['protocol: %s (%d.%d)' % (protocol.orig, protocol.major, protocol.minor)]
    if len(parts) > 1:
        code = StatusCode.from_code(parts[1])
        out.append('status: %s (%s)' % (code, status_class(code)))
    return out


def inspect_headers(stream: BinaryIO, max_header_bytes: int) -> int:
    lines = read_header_block(stream, max_header_bytes)
    if lines and lines[0][:len(HTTP_PROTOCOL_PREFIX)].upper() == HTTP_PROTOCOL_PREFIX:
        for out in describe_status_line(lines[0]):
            print(out)
        lines = lines[1:]
    headers = parse_header_block(lines)
    for key, value in headers.pairs():
        print(build_http_header(key, value))
    return 0


def main(input_args: Optional[List[str]] = None, **opts: Any) -> int:
    args = FlagParser.initialize(input_args, **opts)
    try:
        if args.status is not None:
            code = StatusCode.from_code(args.status)
            print('%s (%s)' % (code, status_class(code)))
            return 0
        if args.method is not None:
            methods = {HttpMethod.parse(m) for m in args.allowed_methods}
            allowed = method_allowed(methods, args.method)
            print('%s %s' % (args.method, 'allowed' if allowed else 'not allowed'))
            return 0 if allowed else 1
        if args.input is None:
            return inspect_headers(sys.stdin.buffer, args.max_header_bytes)
        with open(args.input, 'rb') as stream:
            return inspect_headers(stream, args.max_header_bytes)
    except HeaderBlockTooLarge as e:
        logger.error(str(e))
        return 1
    except UnknownMethod as e:
        print(str(e), file=sys.stderr)
        return 2
    except HttpProtocolException as e:
        logger.error(str(e))
        return 2
    except OSError as e:
        logger.error(str(e))
        return 1


def entry_point() -> None:
    sys.exit(main(sys.argv[1:]))
