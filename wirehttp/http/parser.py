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
import logging

from typing import List, Tuple, Union

from ..common.utils import text_
from ..common.constants import (
    COLON, COMMA, LINE_TERMINATORS, VALUE_TERMINATORS, OPTIONAL_WHITESPACE,
    DEFAULT_DECODE_ERRORS,
)

logger = logging.getLogger(__name__)


def parse_header_list(line: str, start: int = 0) -> List[str]:
    """Splits a comma separated value list beginning at ``start``.

    Optional whitespace before each value is skipped, trailing whitespace
    is kept.  Stops at CR, LF or NUL.  Empty values are preserved."""
    values: List[str] = []
    i, size = start, len(line)
    while i < size and line[i] not in LINE_TERMINATORS:
        while i < size and line[i] in OPTIONAL_WHITESPACE:
            i += 1
        begin = i
        while i < size and line[i] not in VALUE_TERMINATORS:
            i += 1
        values.append(line[begin:i])
        if i < size and line[i] == COMMA:
            i += 1
    return values


def parse_header_line(line: Union[str, bytes]) -> Tuple[str, List[str]]:
    """Parses a single raw header line into key and list of values.

    Transport layers reject structurally invalid lines before calling
    this.  Malformed input yields a best-effort split, never an error:

    - Key is everything before the first colon, neither trimmed nor
      lower cased.
    - Without a colon, the whole line is the key and there are no values.
    - Nothing after the colon means no values.
    """
    line = text_(line, errors=DEFAULT_DECODE_ERRORS)
    colon = line.find(COLON)
    if colon == -1:
        logger.debug('No colon found in header line %r', line)
        return line, []
    key = line[:colon]
    if colon + 1 >= len(line):
        return key, []
    return key, parse_header_list(line, colon + 1)
