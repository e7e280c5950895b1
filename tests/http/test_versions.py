# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import pytest

from wirehttp.http import HttpVersion, Protocol, version_equals, parse_protocol
from wirehttp.http.exception import InvalidProtocolVersion


class TestHttpVersion:

    def test_pairs(self) -> None:
        assert (HttpVersion.HTTP_1_1.major, HttpVersion.HTTP_1_1.minor) == (1, 1)
        assert (HttpVersion.HTTP_1_0.major, HttpVersion.HTTP_1_0.minor) == (1, 0)
        assert str(HttpVersion.HTTP_1_1) == 'HTTP/1.1'
        assert HttpVersion.HTTP_1_0.text == 'HTTP/1.0'

    @pytest.mark.parametrize(
        'protocol, version, expected',
        [
            (('HTTP/1.1', 1, 1), HttpVersion.HTTP_1_1, True),
            (('HTTP/1.0', 1, 0), HttpVersion.HTTP_1_1, False),
            (('HTTP/1.0', 1, 1), HttpVersion.HTTP_1_1, True),
            (('HTTP/1.0', 1, 0), HttpVersion.HTTP_1_0, True),
            (('HTTP/1.1', 1, 1), HttpVersion.HTTP_1_0, False),
            (Protocol('HTTP/2.0', 2, 0), HttpVersion.HTTP_1_0, False),
            (Protocol('whatever', 1, 1), HttpVersion.HTTP_1_1, True),
        ],
    )   # type: ignore[misc]
    def test_version_equals(self, protocol: Protocol, version: HttpVersion, expected: bool) -> None:
        assert version_equals(protocol, version) is expected


class TestParseProtocol:

    def test_parse(self) -> None:
        assert parse_protocol('HTTP/1.1') == Protocol('HTTP/1.1', 1, 1)
        assert parse_protocol(b'HTTP/1.0') == Protocol('HTTP/1.0', 1, 0)
        assert parse_protocol('http/1.1').orig == 'http/1.1'
        assert version_equals(parse_protocol('HTTP/1.1'), HttpVersion.HTTP_1_1)

    def test_missing_parts_read_as_zero(self) -> None:
        assert parse_protocol('HTTP/2') == Protocol('HTTP/2', 2, 0)
        assert parse_protocol('HTTP/') == Protocol('HTTP/', 0, 0)
        assert parse_protocol('HTTP/1.x') == Protocol('HTTP/1.x', 1, 0)

    def test_invalid(self) -> None:
        with pytest.raises(InvalidProtocolVersion):
            parse_protocol('FTP/1.1')
        with pytest.raises(ValueError):
            parse_protocol('')
