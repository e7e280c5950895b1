# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import io

from pathlib import Path

import pytest

from pytest_mock import MockerFixture

from wirehttp.main import main, entry_point, read_header_block, parse_header_block, status_class
from wirehttp.http import StatusCode
from wirehttp.http.exception import HeaderBlockTooLarge
from wirehttp.common.constants import HEADER_LIMIT


RAW_RESPONSE_HEAD = (
    b'HTTP/1.1 200 OK\r\n' +
    b'Set-Cookie: a=1\r\n' +
    b'set-cookie: b=2\r\n' +
    b'Connection: Upgrade, Close\r\n' +
    b'X-Empty:\r\n' +
    b'\r\n' +
    b'<html>body is never read</html>'
)


class TestReadHeaderBlock:

    def test_stops_at_blank_line(self) -> None:
        lines = read_header_block(io.BytesIO(RAW_RESPONSE_HEAD))
        assert lines == [
            'HTTP/1.1 200 OK',
            'Set-Cookie: a=1',
            'set-cookie: b=2',
            'Connection: Upgrade, Close',
            'X-Empty:',
        ]

    def test_limit(self) -> None:
        with pytest.raises(HeaderBlockTooLarge) as exc_info:
            read_header_block(io.BytesIO(b'A: ' + b'x' * 20 + b'\r\n'), 16)
        assert exc_info.value.limit == 16
        assert exc_info.value.size == 17

    def test_limit_without_line_terminator(self) -> None:
        stream = io.BytesIO(b'A' * 1000)
        with pytest.raises(HeaderBlockTooLarge) as exc_info:
            read_header_block(stream, 16)
        assert exc_info.value.size == 17
        assert stream.tell() == 17

    def test_within_limit(self) -> None:
        raw = b'A: 1\r\n\r\n'
        assert read_header_block(io.BytesIO(raw), len(raw)) == ['A: 1']

    def test_undecodable_bytes_are_replaced(self) -> None:
        lines = read_header_block(io.BytesIO(b'X-Bin: \xff\xfe\r\n\r\n'))
        assert lines == ['X-Bin: \ufffd\ufffd']

    def test_default_limit(self) -> None:
        big = b'A: ' + b'x' * HEADER_LIMIT + b'\r\n'
        with pytest.raises(HeaderBlockTooLarge):
            read_header_block(io.BytesIO(big))


class TestParseHeaderBlock:

    def test_accumulates_repeated_headers(self) -> None:
        headers = parse_header_block([
            'Set-Cookie: a=1',
            'set-cookie: b=2',
            'X-Empty:',
            'Connection: Upgrade, Close',
        ])
        assert headers['set-cookie'] == ['a=1', 'b=2']
        assert headers['connection'] == ['Upgrade', 'Close']
        assert headers.has_key('x-empty')
        assert len(headers['x-empty']) == 0

    def test_empty_header_line_keeps_earlier_values(self) -> None:
        headers = parse_header_block(['Vary: Accept', 'Vary:'])
        assert headers['vary'] == ['Accept']


class TestMain:

    @pytest.fixture(autouse=True)   # type: ignore[misc]
    def _setUp(self, mocker: MockerFixture) -> None:
        self.mock_logger_setup = mocker.patch('wirehttp.common.flag.Logger.setup')

    def test_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['--status', '404']) == 0
        assert capsys.readouterr().out == '404 Not Found (4xx)\n'

    def test_unknown_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['--status', '299']) == 2
        assert capsys.readouterr().out == ''

    def test_method_allowed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['--method', 'GET', '--allowed-methods', 'GET,POST']) == 0
        assert capsys.readouterr().out == 'GET allowed\n'

    def test_method_not_allowed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['--method', 'PUT'], allowed_methods=['GET']) == 1
        assert capsys.readouterr().out == 'PUT not allowed\n'

    def test_unknown_method(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['--method', 'PATCH']) == 2
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'PATCH' in captured.err

    def test_inspect_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / 'head.txt'
        path.write_bytes(RAW_RESPONSE_HEAD)
        assert main(['--input', str(path)]) == 0
        assert capsys.readouterr().out == '\n'.join([
            'protocol: HTTP/1.1 (1.1)',
            'status: 200 OK (2xx)',
            'set-cookie: a=1',
            'set-cookie: b=2',
            'connection: Upgrade',
            'connection: Close',
        ]) + '\n'

    def test_inspect_stdin(self, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]) -> None:
        mock_stdin = mocker.patch('wirehttp.main.sys.stdin')
        mock_stdin.buffer = io.BytesIO(b'Host: example.com\r\n\r\n')
        assert main([]) == 0
        assert capsys.readouterr().out == 'host: example.com\n'

    def test_inspect_stdin_undecodable(self, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]) -> None:
        mock_stdin = mocker.patch('wirehttp.main.sys.stdin')
        mock_stdin.buffer = io.BytesIO(b'X-Bin: \xff\r\n\r\n')
        assert main([]) == 0
        assert capsys.readouterr().out == 'x-bin: \ufffd\n'

    def test_inspect_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['--input', str(tmp_path / 'missing.txt')]) == 1
        assert capsys.readouterr().out == ''

    def test_inspect_too_large(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / 'head.txt'
        path.write_bytes(RAW_RESPONSE_HEAD)
        assert main(['--input', str(path)], max_header_bytes=10) == 1
        assert capsys.readouterr().out == ''

    def test_entry_point(self, mocker: MockerFixture) -> None:
        mocker.patch('wirehttp.main.sys.argv', ['wirehttp', '--status', '200'])
        with pytest.raises(SystemExit) as exc_info:
            entry_point()
        assert exc_info.value.code == 0


@pytest.mark.parametrize(
    'code, expected',
    [
        (StatusCode.CONTINUE, '1xx'),
        (StatusCode.NO_CONTENT, '2xx'),
        (StatusCode.NOT_MODIFIED, '3xx'),
        (StatusCode.TOO_MANY_REQUESTS, '4xx'),
        (StatusCode.BAD_GATEWAY, '5xx'),
    ],
)   # type: ignore[misc]
def test_status_class(code: StatusCode, expected: str) -> None:
    assert status_class(code) == expected
