# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .main import entry_point

if __name__ == '__main__':
    entry_point()
