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
       iterable
"""
from typing import Any, Dict, Generator, Iterable, Iterator, List, Optional, Tuple, Union

from .exception import KeyNotFound, IndexOutOfRange
from ..common.utils import text_
from ..common.constants import DEFAULT_DECODE_ERRORS


def normalize(key: Union[str, bytes]) -> str:
    """Lower cased form under which a header key is stored and looked up."""
    return str(text_(key, errors=DEFAULT_DECODE_ERRORS)).lower()


class HeaderValues:
    """All values of a single header key, in the order they were set or added.

    Wraps the list stored inside :class:`HeaderMap` without copying it.
    ``str(values)`` returns the first value and raises
    :exc:`IndexOutOfRange` when there is none.  Membership tests
    with ``in`` ignore case.
    """

    def __init__(self, values: Optional[List[str]] = None, key: Optional[str] = None) -> None:
        self._values: List[str] = values if values is not None else []
        self.key = key

    def __str__(self) -> str:
        if not self._values:
            raise IndexOutOfRange(self.key, 0, 0)
        return self._values[0]

    def __repr__(self) -> str:
        return 'HeaderValues(%r)' % self._values

    def __contains__(self, value: Any) -> bool:
        needle = str(text_(value, errors=DEFAULT_DECODE_ERRORS)).lower()
        for v in self._values:
            if v.lower() == needle:
                return True
        return False

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, HeaderValues):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == list(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int) or index < 0 or index >= len(self._values):
            raise IndexOutOfRange(self.key, index, len(self._values))
        return self._values[index]


class HeaderMap:
    """Case-insensitive, multi-valued header container.

    Keys are lower cased on every entry point and only the lower cased
    form is retained.  Each key maps to an ordered list of values.
    No internal locking, owners sharing an instance across threads
    must synchronize access themselves.
    """

    def __init__(self, pairs: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self.table: Dict[str, List[str]] = {}
        if pairs is not None:
            for key, value in pairs:
                # One value per key, a repeated key replaces the earlier
                # value.  Only add() accumulates.
                self.table[normalize(key)] = [text_(value, errors=DEFAULT_DECODE_ERRORS)]

    def get(self, key: Union[str, bytes], index: Optional[int] = None) -> Any:
        """Returns :class:`HeaderValues` for ``key``, or the ``index``'th
        value when ``index`` is given.

        Raises :exc:`KeyNotFound` for a missing key and
        :exc:`IndexOutOfRange` for a missing value."""
        k = normalize(key)
        if k not in self.table:
            raise KeyNotFound(text_(key, errors=DEFAULT_DECODE_ERRORS))
        values = HeaderValues(self.table[k], k)
        if index is None:
            return values
        return values[index]

    def set(self, key: Union[str, bytes], value: Union[str, bytes, Iterable[str]]) -> None:
        """Replaces every value of ``key`` with ``value``, a single
        value or a sequence of values."""
        if isinstance(value, (str, bytes)):
            self.table[normalize(key)] = [text_(value, errors=DEFAULT_DECODE_ERRORS)]
        else:
            self.table[normalize(key)] = [text_(v, errors=DEFAULT_DECODE_ERRORS) for v in value]

    def add(self, key: Union[str, bytes], value: Union[str, bytes]) -> None:
        """Appends ``value`` to any existing values of ``key``."""
        self.table.setdefault(normalize(key), []).append(text_(value, errors=DEFAULT_DECODE_ERRORS))

    def has_key(self, key: Union[str, bytes]) -> bool:
        return normalize(key) in self.table

    def get_or_default(
            self,
            key: Union[str, bytes],
            default: Optional[HeaderValues] = None,
    ) -> HeaderValues:
        """Returns values of ``key`` or ``default``.  Without an explicit
        default, a single empty string value is returned."""
        if self.has_key(key):
            return self.get(key)
        if default is None:
            return HeaderValues([''], normalize(key))
        return default

    def clear(self) -> None:
        self.table.clear()

    def keys(self) -> Iterator[str]:
        return iter(self.table.keys())

    def pairs(self) -> Generator[Tuple[str, str], None, None]:
        """Yields one ``(key, value)`` tuple per stored value, in key
        insertion order and value order within each key."""
        for k, values in self.table.items():
            for value in values:
                yield k, value

    def __getitem__(self, key: Union[str, bytes, Tuple[Union[str, bytes], int]]) -> Any:
        if isinstance(key, tuple):
            return self.get(key[0], key[1])
        return self.get(key)

    def __setitem__(self, key: Union[str, bytes], value: Union[str, bytes, Iterable[str]]) -> None:
        self.set(key, value)

    def __contains__(self, key: Any) -> bool:
        return self.has_key(key)

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        return 'HeaderMap(%r)' % self.table
